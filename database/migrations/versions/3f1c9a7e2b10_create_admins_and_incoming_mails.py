"""create admins and incoming_mails

Revision ID: 3f1c9a7e2b10
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f1c9a7e2b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

letter_status = sa.Enum('Diterima', 'Diproses', 'Selesai', 'Ditolak', name='letter_status')
department = sa.Enum(
    'Bidang Mutasi', 'Bidang Kepegawaian', 'Bidang Pengembangan', 'Bidang Administrasi',
    name='department',
)


def upgrade() -> None:
    op.create_table(
        'admins',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
    )
    op.create_index('idx_admins_created', 'admins', ['created_at'])

    op.create_table(
        'incoming_mails',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('registration_number', sa.String(), nullable=False),
        sa.Column('sender_name', sa.String(), nullable=False),
        sa.Column('opd_name', sa.String(), nullable=False),
        sa.Column('letter_number', sa.String(), nullable=False),
        sa.Column('letter_subject', sa.String(), nullable=False),
        sa.Column('receiver_name', sa.String(), nullable=False),
        sa.Column('incoming_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', letter_status, nullable=False),
        sa.Column('department', department, nullable=False),
        sa.Column('update_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('registration_number'),
    )
    op.create_index('idx_incoming_mails_created', 'incoming_mails', ['created_at'])
    op.create_index('idx_incoming_mails_status', 'incoming_mails', ['status'])
    op.create_index('idx_incoming_mails_sender', 'incoming_mails', ['sender_name'])


def downgrade() -> None:
    op.drop_index('idx_incoming_mails_sender', table_name='incoming_mails')
    op.drop_index('idx_incoming_mails_status', table_name='incoming_mails')
    op.drop_index('idx_incoming_mails_created', table_name='incoming_mails')
    op.drop_table('incoming_mails')
    op.drop_index('idx_admins_created', table_name='admins')
    op.drop_table('admins')
    department.drop(op.get_bind(), checkfirst=True)
    letter_status.drop(op.get_bind(), checkfirst=True)
