'''
Default checks of a collection against the limits of a format.

Nothing here raises or touches the collection: what is found is returned and
it's the caller that decides if it's the case to abort the write.
'''
import logging
from typing import List

from .core import Collection


logger = logging.getLogger(__name__)


def check_limits(limits, collection: Collection) -> List[str]:
    '''Return the problems that will prevent the collection from being written
    in a format with the given limits; an empty list means no problem.'''
    issues = []

    if limits.max_file_count is not None and len(collection.files) > limits.max_file_count:
        issues.append(f'There are {len(collection.files)} files to save, but this '
                      f'format can only store up to {limits.max_file_count} files.')

    if limits.max_filename_len is not None:
        for entry in collection.files:
            if len(entry.name) > limits.max_filename_len:
                issues.append(f'Filename length is {len(entry.name)}, max is '
                              f'{limits.max_filename_len}: {entry.name}')

    return issues


def check_advisories(collection: Collection) -> List[str]:
    '''Return the non blocking problems of the collection, the ones that only
    make the write slower.'''
    advisories = []

    for entry in collection.files:
        if entry.native_size != 0:
            continue

        content = entry.get_content()
        if len(content) != 0:
            advisories.append(f'File {entry.name} has native_size unset but content is '
                              f'{len(content)} bytes. This will cause slow memory '
                              f'reallocations during writes and should be fixed if possible.')

    return advisories
