import re

from app.services.reference_service import (
    random_token,
    generate_payment_ref,
    generate_registration_number,
    generate_application_id,
    generate_case_id,
)
from utils.constants import CASE_ID_ALPHABET


def test_random_token_uses_alphabet():
    token = random_token(50, "AB")
    assert len(token) == 50
    assert set(token) <= {"A", "B"}


def test_case_ids_are_upper_alphanumeric():
    for _ in range(200):
        case_id = generate_case_id()
        assert re.fullmatch(r"CASE-[A-Z0-9]{7}", case_id)
        assert set(case_id[5:]) <= set(CASE_ID_ALPHABET)


def test_registration_numbers_stay_in_range():
    for _ in range(200):
        number = int(generate_registration_number().removeprefix("PACRA-"))
        assert 10000 <= number <= 99999


def test_payment_ref_shape():
    assert re.fullmatch(r"ZMTAX-[A-Za-z0-9_-]{8}", generate_payment_ref())


def test_application_id_is_millisecond_timestamp():
    first = int(generate_application_id().removeprefix("IDAPP-"))
    second = int(generate_application_id().removeprefix("IDAPP-"))
    assert len(str(first)) >= 13
    assert second >= first
