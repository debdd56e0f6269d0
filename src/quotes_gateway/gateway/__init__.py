from .user_gateway import UserGateway
from .serialization import user_to_record, record_to_user, encode_bool, decode_bool
