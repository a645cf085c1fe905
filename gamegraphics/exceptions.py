class GameGraphicsException(Exception):
    '''Base class to extend in order to throw exception in gamegraphics.'''
    pass


class InvalidArgumentException(GameGraphicsException, ValueError):
    '''Parameters that make any further processing meaningless, like a
    plane width of zero.'''
    pass


class UnpackException(GameGraphicsException):
    '''The content can't be decoded by the handler it was passed to.'''

    def __init__(self, message, handler=None):
        self.handler = handler
        super().__init__(message if handler is None else f'{handler}: {message}')


class MagicException(UnpackException):
    '''The signature of the content doesn't match the one of the format.'''
    pass
