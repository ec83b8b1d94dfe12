#!/usr/bin/env python3
"""
AWS Console Login

Run from a shell where the profile's temporary credentials are exported:

    export AWS_PROFILE=dev   # plus AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY, AWS_SESSION_TOKEN
    python3 scripts/console_login.py dev --region eu-west-1
"""

import os
import sys

# Add the parent directory to the path so we can import the awsconsole package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from awsconsole.cli import main

if __name__ == "__main__":
    main()
