"""
Modules package initialization.
This package contains all the functional modules of the application.
"""

from app.modules import auth
from app.modules import user_management
from app.modules import subscriptions
from app.modules import posts
from app.modules import follows
