import logging

from gamegraphics.core import Collection, Entry
from gamegraphics.handler import FormatHandler, Limits, Metadata
from gamegraphics.limits import check_advisories, check_limits


def make_collection(*names, content=b'data'):
    return Collection([Entry(name, native_size=len(content), get_content=lambda: content) for name in names])


def test_max_file_count():
    collection = make_collection('a', 'b', 'c', 'd', 'e')

    issues = check_limits(Limits(max_file_count=3), collection)

    assert len(issues) == 1
    assert '5' in issues[0]
    assert '3' in issues[0]


def test_max_file_count_zero_is_a_limit():
    issues = check_limits(Limits(max_file_count=0), make_collection('a'))

    assert len(issues) == 1


def test_max_filename_len():
    name = 'abcdefghij.klmnopqrs'
    assert len(name) == 20

    issues = check_limits(Limits(max_filename_len=12), make_collection('short.bin', name))

    assert len(issues) == 1
    assert name in issues[0]
    assert '20' in issues[0]
    assert '12' in issues[0]


def test_no_limits():
    collection = make_collection('a' * 100, *['b'] * 100)

    assert check_limits(Limits(), collection) == []


def test_check_limits_does_not_touch_the_collection():
    collection = make_collection('a', 'b', 'c')
    files = list(collection.files)

    check_limits(Limits(max_file_count=1, max_filename_len=0), collection)

    assert collection.files == files


def test_advisories():
    collection = Collection([
        Entry('unset', native_size=0, get_content=lambda: b'abc'),
        Entry('set', native_size=3, get_content=lambda: b'abc'),
        Entry('empty', native_size=0),
    ])

    advisories = check_advisories(collection)

    assert len(advisories) == 1
    assert 'unset' in advisories[0]


def test_handler_logs_advisories(caplog):
    """The advisories are only logged, they don't end up among the issues."""
    class Limited(FormatHandler):
        @classmethod
        def metadata(cls):
            return Metadata(id='limited', title='Limited', limits=Limits(max_file_count=1))

    collection = Collection([Entry('unset', get_content=lambda: b'abc')])

    with caplog.at_level(logging.WARNING):
        issues = Limited.check_limits(collection)

    assert issues == []
    assert 'native_size unset' in caplog.text

    collection.files.append(Entry('other', native_size=1, get_content=lambda: b'x'))
    assert len(Limited.check_limits(collection)) == 1
