"""Primary keys for users and tasks: 24-character CUID2 strings."""

from cuid2 import Cuid

_ids = Cuid(length=24)


def generate_cuid() -> str:
    return _ids.generate()
