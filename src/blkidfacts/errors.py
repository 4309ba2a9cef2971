"""Exception types raised across the collect/flatten/reassemble pipeline."""


class BlkidFactsError(Exception):
    """Base class for all blkidfacts errors."""


class CommandUnavailable(BlkidFactsError):
    """No usable blkid command could be located (or installed)."""


class ExecutionFailed(BlkidFactsError):
    """The command ran but produced no output at all."""


class ParseError(BlkidFactsError, ValueError):
    """A line of blkid output could not be parsed. The whole parse is aborted."""


class ReassembleError(BlkidFactsError):
    """Required facts are missing or malformed; raised to the caller of get_blkid_info."""
