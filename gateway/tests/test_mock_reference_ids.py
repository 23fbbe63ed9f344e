import re

from gateway.app.services.references import epoch_millis, mock_reference


def test_reference_uses_prefix_and_given_millis():
    assert mock_reference("VAT", now_ms=1718000000123) == "VAT-1718000000123"


def test_reference_uses_current_epoch_millis():
    before = epoch_millis()
    ref = mock_reference("RTI")
    after = epoch_millis()

    match = re.match(r"^RTI-(\d+)$", ref)
    assert match
    assert before <= int(match.group(1)) <= after


def test_epoch_millis_is_thirteen_digits():
    assert len(str(epoch_millis())) == 13
