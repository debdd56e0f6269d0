"""
Exception definitions for quotes-gateway package
"""


class QuotesGatewayException(Exception):
    """
    Base class for all exceptions raised by the gateway.
    """

    def __init__(self,
                 message: str = None,
                 status_code: int = 500,
                 ):
        super().__init__(message)

        self.message = message
        self.status_code = status_code


class ConfigurationParsingException(QuotesGatewayException):
    """
    Exception raised when there is an error parsing the configuration.
    """
    def __init__(self,
                 message: str = 'Error parsing configuration.',
                 status_code: int = 400,
                 ):
        super().__init__(message, status_code)


class InvalidArgumentException(QuotesGatewayException):
    """
    Exception raised when a value passed to the gateway is not a User.
    """
    def __init__(self,
                 message: str = 'Argument is not a user entity.',
                 status_code: int = 400,
                 ):
        super().__init__(message, status_code)


class DuplicateEntityException(QuotesGatewayException):
    """
    Exception raised when adding a user that has already been persisted.
    """
    def __init__(self,
                 message: str = 'User has already been persisted.',
                 status_code: int = 409,
                 ):
        super().__init__(message, status_code)


class NotFoundException(QuotesGatewayException):
    """
    Exception raised when a user record does not exist.
    """
    def __init__(self,
                 message: str = 'User not found.',
                 status_code: int = 404,
                 ):
        super().__init__(message, status_code)


class RecordDecodingException(QuotesGatewayException):
    """
    Exception raised when a stored record cannot be turned back into a user.
    """
    def __init__(self,
                 message: str = 'Error decoding stored user record.',
                 status_code: int = 500,
                 ):
        super().__init__(message, status_code)
