from crud import dashboard
from crud import incoming_mail as mail_crud
from service.tracking import track_document


def test_stats_on_empty_store(db_session):
    assert dashboard.get_stats(db_session) == {
        'total_mails': 0,
        'processed_mails': 0,
        'completed_mails': 0,
    }


def test_stats_counts_per_status(db_session, make_mail):
    for status in ['Diterima', 'Diproses', 'Selesai', 'Diproses', 'Selesai', 'Ditolak']:
        make_mail(status=status)

    assert dashboard.get_stats(db_session) == {
        'total_mails': 6,
        'processed_mails': 2,
        'completed_mails': 2,
    }


def test_stats_follow_updates(db_session, make_mail):
    mail = make_mail(status='Diproses')
    mail_crud.update(db_session, mail.id, {'status': 'Selesai'})

    stats = dashboard.get_stats(db_session)
    assert stats['processed_mails'] == 0
    assert stats['completed_mails'] == 1


def test_track_projects_public_fields_only(db_session, make_mail):
    make_mail(
        registration_number='REG/2024/077',
        status='Diproses',
        department='Bidang Kepegawaian',
        notes='Menunggu tanda tangan kepala bidang',
    )

    result = track_document(db_session, 'REG/2024/077')

    assert result is not None
    data = result.model_dump()
    assert set(data) == {
        'registration_number',
        'last_status',
        'handling_department',
        'last_update_date',
        'progress_notes',
    }
    assert data['last_status'] == 'Diproses'
    assert data['handling_department'] == 'Bidang Kepegawaian'
    assert data['last_update_date'] is None
    assert data['progress_notes'] == 'Menunggu tanda tangan kepala bidang'


def test_track_miss_returns_none(db_session, make_mail):
    make_mail(registration_number='REG-2024-001')
    assert track_document(db_session, 'REG-9999') is None


def test_track_is_case_sensitive(db_session, make_mail):
    make_mail(registration_number='REG-abc')
    assert track_document(db_session, 'REG-ABC') is None
