from workschedule.diagnostics import PROBABLE_CAUSES, SUCCESS_MESSAGE, generate_status_message


def test_success_message():
    assert generate_status_message([]) == SUCCESS_MESSAGE


def test_warning_lists_count_and_causes():
    message = generate_status_message(["Mon-Morning", "Tue-Night", "Sat-Evening"])
    assert "3 shifts could not be filled" in message
    for cause in PROBABLE_CAUSES:
        assert cause in message


def test_warning_singular():
    assert "1 shift could not be filled" in generate_status_message(["Mon-Morning"])
