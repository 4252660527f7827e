from datetime import datetime, timezone


def mail_data(**overrides) -> dict:
    data = {
        'registration_number': 'REG-2024-001',
        'sender_name': 'Budi Santoso',
        'opd_name': 'Dinas Pendidikan',
        'letter_number': '800/123/DISDIK/2024',
        'letter_subject': 'Permohonan Mutasi Pegawai',
        'receiver_name': 'Siti Rahayu',
        'incoming_date': datetime(2024, 1, 15, 8, 0, tzinfo=timezone.utc),
        'status': 'Diterima',
        'department': 'Bidang Mutasi',
    }
    data.update(overrides)
    return data


def naive(dt):
    """sqlite hands timestamps back without tzinfo; compare in naive UTC."""
    if dt is not None and dt.tzinfo is not None:
        return dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def snapshot(obj) -> dict:
    return {c.name: getattr(obj, c.name) for c in obj.__table__.columns}
