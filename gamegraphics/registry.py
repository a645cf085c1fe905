import logging
from typing import List, Optional, Tuple

from .enum import Confidence


logger = logging.getLogger(__name__)


class FormatRegistry(object):
    '''Fixed list of format handlers.

    The order matters for the autodetection: handlers with reliable
    identification must come before the ones that are ambiguous.'''

    def __init__(self, handlers):
        self._handlers = tuple(handlers)

    def __repr__(self):
        return '<%s(%s)>' % (
            self.__class__.__name__,
            ','.join(_.metadata().id for _ in self._handlers),
        )

    def get_handler(self, id: str):
        '''Return the handler with the given identifier or None.'''
        for handler in self._handlers:
            if handler.metadata().id == id:
                return handler

        return None

    def find_handler(self, content) -> List:
        '''Return the handlers able to read the content.

        The first handler reporting a definite match is the only one returned,
        otherwise all the handlers reporting a possible match are returned in
        registry order; an empty list means the format is unknown.'''
        candidates = []
        for handler in self._handlers:
            confidence = handler.identify(content)
            logger.debug(f'{handler.metadata().id}: {confidence}')

            if confidence is Confidence.DEFINITE_MATCH:
                return [handler]

            if confidence is Confidence.POSSIBLE_MATCH:
                # keep going to look for a better match
                candidates.append(handler)

        return candidates

    def list_handlers(self) -> Tuple:
        return self._handlers
