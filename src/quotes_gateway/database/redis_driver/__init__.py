from .database import RedisDatabase
from .user import RedisUserBackend
