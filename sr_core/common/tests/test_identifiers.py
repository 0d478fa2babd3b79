# sr_core/common/tests/test_identifiers.py
import re

from sr_core.common.identifiers import new_order_id, new_registration_number


def test_order_id_format():
    assert re.fullmatch(r"SUB-\d{13}-[0-9a-z]{9}", new_order_id())


def test_registration_number_format():
    assert re.fullmatch(r"INC-\d{13}-[0-9A-Z]{6}", new_registration_number())


def test_identifiers_generated_in_the_same_millisecond_differ():
    order_ids = {new_order_id() for _ in range(200)}
    numbers = {new_registration_number() for _ in range(200)}

    assert len(order_ids) == 200
    assert len(numbers) == 200
