"""conftest_helpers.py
Helper functions for `tests/conftest.py`
"""
import itertools

from resume_ats.parse_classes.field_extractor import field_extractor


# --------------------------------------------------------------
# SETUP MONKEYPATCH FIXTURES
# --------------------------------------------------------------
def make_sequential_id_generator(prefix: str = "entry"):
    """
    Build an id generator returning `entry-1`, `entry-2`, ... on each call.

    Example:
        generate = make_sequential_id_generator()
        generate()  # -> "entry-1"
    """
    counter = itertools.count(1)

    def generate() -> str:
        return f"{prefix}-{next(counter)}"

    return generate


def apply_sequential_id_patch(monkeypatch):
    """
    Core patching logic for the default entry id generator.

    Replaces `generate_entry_id` so every extractor built without an explicit
    `id_generator` hands out `entry-1`, `entry-2`, ... instead of random UUIDs.

    Notes:
      - Intended to be called from a fixture to control scope.
      - Does not yield; directly applies the monkeypatch.
      - Extractors built before the patch keep the generator they were given.
    """
    monkeypatch.setattr(
        field_extractor,
        "generate_entry_id",
        make_sequential_id_generator(),
    )
