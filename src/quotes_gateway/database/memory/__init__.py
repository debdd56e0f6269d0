from .database import MemoryDatabase
from .user import MemoryUserBackend
