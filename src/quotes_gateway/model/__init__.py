from .user import User, UserBackend
