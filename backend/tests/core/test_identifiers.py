"""User Identifiers — shape and uniqueness of generated ids."""

import re

from users_api.core.identifiers import new_user_id


def test_id_is_32_hex_chars():
    assert re.fullmatch(r"[0-9a-f]{32}", new_user_id())


def test_ids_do_not_repeat():
    ids = {new_user_id() for _ in range(1000)}
    assert len(ids) == 1000
