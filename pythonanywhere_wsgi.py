import os
import sys

# Add the project directory to the sys.path
project_home = os.path.dirname(os.path.abspath(__file__))
if project_home not in sys.path:
    sys.path.insert(0, project_home)

# Import the Flask app and give it a fresh ingredient store
from app import app as application, reset_store

reset_store()
