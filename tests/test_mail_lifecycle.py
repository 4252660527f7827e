"""Progress-stamp rules for partial mail updates."""
from datetime import datetime, timezone

from service.mail_lifecycle import apply_update_policy

NOW = datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)


def test_status_change_stamps_update_date():
    values = apply_update_policy({'status': 'Selesai'}, now=NOW)
    assert values == {'status': 'Selesai', 'update_date': NOW, 'updated_at': NOW}


def test_explicit_update_date_wins_over_stamp():
    explicit = datetime(2024, 2, 20, tzinfo=timezone.utc)
    values = apply_update_policy({'status': 'Selesai', 'update_date': explicit}, now=NOW)
    assert values['update_date'] == explicit


def test_explicit_null_update_date_clears_stamp():
    values = apply_update_policy({'status': 'Selesai', 'update_date': None}, now=NOW)
    assert values['update_date'] is None


def test_without_status_update_date_is_untouched():
    values = apply_update_policy({'notes': 'x'}, now=NOW)
    assert 'update_date' not in values
    assert values['updated_at'] == NOW


def test_empty_change_set_still_refreshes_updated_at():
    assert apply_update_policy({}, now=NOW) == {'updated_at': NOW}


def test_input_is_not_mutated():
    changes = {'status': 'Diproses'}
    apply_update_policy(changes, now=NOW)
    assert changes == {'status': 'Diproses'}
