from enum import Flag


class ChunkTypeFlag(Flag):
    '''The properties encoded in the case of each letter of a chunk type:
    a lowercase letter (bit 5 set) raises the corresponding flag.'''
    NONE         = 0
    ANCILLARY    = 1 << 0
    PRIVATE      = 1 << 1
    RESERVED     = 1 << 2
    SAFE_TO_COPY = 1 << 3
