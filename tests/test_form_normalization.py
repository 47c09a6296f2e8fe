from modules.form import mask_phone, only_digits


def test_mask_phone_full_number():
    assert mask_phone("11987654321") == "(11) 98765-4321"


def test_mask_phone_strips_non_digits_before_formatting():
    assert mask_phone("(11) 9 8765-4321") == "(11) 98765-4321"
    assert mask_phone("abc") == ""
    assert only_digits("+55 (11) 9") == "55119"


def test_mask_phone_is_progressive():
    assert mask_phone("1") == "1"
    assert mask_phone("11") == "11"
    assert mask_phone("119") == "(11) 9"
    assert mask_phone("1198765") == "(11) 98765"
    assert mask_phone("11987654") == "(11) 98765-4"


def test_mask_phone_landline_and_reapplied_mask():
    assert mask_phone("1133334444") == "(11) 33334-444"
    assert mask_phone(mask_phone("11987654321")) == "(11) 98765-4321"


def test_mask_phone_never_exceeds_fifteen_chars():
    for raw in ("1198765432100000", "9" * 40, "(11) 98765-4321 ramal 22"):
        masked = mask_phone(raw)
        assert len(masked) <= 15
        assert masked.startswith("(")
