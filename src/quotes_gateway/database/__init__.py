from .database import Database, get_active_db, reset_active_db, get_user_gateway
