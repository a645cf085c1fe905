from enum import Enum, auto


class Confidence(Enum):
    '''Result of the format autodetection.

    POSSIBLE_MATCH is returned when the data could be in the format but
    nothing in it is able to confirm it (think about an empty file).'''
    DEFINITE_MATCH    = auto()
    DEFINITE_NO_MATCH = auto()
    POSSIBLE_MATCH    = auto()
