'''
Base class and defaults for the format handlers.

To implement a new file format this is the class to extend, replacing its
methods with the ones doing the actual work. All the methods are classmethods:
a handler has no state and the registry keeps the classes themselves.
'''
import logging
from typing import Dict, List, NamedTuple, Optional, Tuple

from .enum import Confidence
from .limits import check_limits, check_advisories


logger = logging.getLogger(__name__)


class Limits(NamedTuple):
    '''Structural limits of a format, None means there is no limit.

    max_filename_len counts the characters of the name including the dots,
    for a format storing DOS 8.3 filenames it would be 12.'''
    max_filename_len: Optional[int] = None
    max_file_count: Optional[int] = None


class Metadata(NamedTuple):
    '''Static description of a format.

    glob lists the filename expressions matching files often in this format,
    like ('*.pal', 'file*.bin').'''
    id: str
    title: str
    games: Tuple[str, ...] = ()
    glob: Tuple[str, ...] = ()
    limits: Limits = Limits()


class FormatHandler(object):

    @classmethod
    def metadata(cls) -> Metadata:
        '''This must be overridden by all the handlers.'''
        return Metadata(id='unknown', title='Unknown format')

    @classmethod
    def check_limits(cls, model) -> List[str]:
        '''Identify any problem writing the given model in this format.

        The default implementation works on collections; the non blocking
        problems are only logged.'''
        for advisory in check_advisories(model):
            logger.warning(advisory)

        return check_limits(cls.metadata().limits, model)

    @classmethod
    def supps(cls, name: str, content) -> Optional[Dict[str, str]]:
        '''Return the supplementary files needed to use the format.

        Some formats store their data across multiple files: the result is None
        if there is nothing else to load, otherwise a dictionary having as keys
        an identifier specific to the handler and as values the expected
        case-insensitive filenames. The passed name must not be converted to
        lowercase but anything appended to it (like an extension) should be.'''
        return None

    @classmethod
    def identify(cls, content) -> Confidence:
        '''See if the content is in the format supported by this handler.

        More than one handler might report that it supports the content, think
        about an empty file, so POSSIBLE_MATCH exists for data that can't be
        positively identified.'''
        return Confidence.DEFINITE_NO_MATCH

    @classmethod
    def parse(cls, content):
        '''Decode the content: a dictionary with the main file under the key
        "main" and the supplementary files under their identifiers.'''
        raise NotImplementedError(f'method {cls.__name__}.parse() not implemented')

    @classmethod
    def generate(cls, model) -> Dict[str, bytes]:
        '''Encode the model returning a dictionary shaped like the one accepted
        by parse().

        The model must have already passed check_limits() otherwise the result
        is undefined and a corrupted file might be produced.'''
        raise NotImplementedError(f'method {cls.__name__}.generate() not implemented')


def get_main(content) -> bytes:
    '''Return the main file from the content passed to parse(), accepting
    also the bare bytes.'''
    if isinstance(content, dict):
        return content['main']

    return content
