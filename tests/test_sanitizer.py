from contact_relay.services.sanitizer import MAX_LENGTH, sanitize_input


def test_script_tag_is_defanged() -> None:
    cleaned: str = sanitize_input("<script>alert('x')</script> Hello")

    assert "<" not in cleaned
    assert ">" not in cleaned
    assert "script" not in cleaned.lower()
    assert "Hello" in cleaned
    assert cleaned == "alert('x')/ Hello"


def test_falsy_input_returns_empty_string() -> None:
    assert sanitize_input(None) == ""
    assert sanitize_input("") == ""


def test_trims_whitespace() -> None:
    assert sanitize_input("   Jane Doe \n") == "Jane Doe"


def test_removes_javascript_scheme_case_insensitively() -> None:
    assert sanitize_input("click JavaScript:alert(1)") == "click alert(1)"


def test_removes_event_handler_attributes() -> None:
    assert sanitize_input('img src=x OnError="steal()"') == 'img src=x "steal()"'
    assert sanitize_input("onclick=go") == "go"


def test_order_matters_for_split_keywords() -> None:
    # Brackets go first, so "scr<ipt" turns into "script" and is then removed
    assert sanitize_input("scr<ipt>ing") == "ing"


def test_strips_script_from_innocent_words() -> None:
    assert sanitize_input("Please review my manuscript") == "Please review my manu"


def test_truncates_long_input() -> None:
    cleaned: str = sanitize_input("a" * (MAX_LENGTH + 500))

    assert len(cleaned) == MAX_LENGTH


def test_can_empty_a_field() -> None:
    assert sanitize_input("<>script<>") == ""
