"""create job tracker tables (users, companies, job_applications, notes)

Revision ID: 20261018_0900
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '20261018_0900'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the tables read by the job application query API.

    Indexes follow the listing access paths:
    - (user_id, created_at) for the default sort and recent applications
    - (user_id, status) for status filters and the stats breakdown
    - (user_id, applied_date) for applied date ranges
    """
    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False,
                  server_default=sa.text("gen_random_uuid()")),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'companies',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False,
                  server_default=sa.text("gen_random_uuid()")),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('industry', sa.String(length=100), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('website', sa.String(length=500), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('size', sa.String(length=50), nullable=True, comment='Headcount bucket, e.g. 10000+'),
        sa.Column('logo_url', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_companies_name', 'companies', ['name'], unique=True)

    op.create_table(
        'job_applications',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False,
                  server_default=sa.text("gen_random_uuid()")),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('company_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False, server_default='APPLIED',
                  comment='APPLIED, PHONE_SCREEN, FINAL_INTERVIEW, TECHNICAL_TEST, OFFER, '
                          'NEGOTIATION, ACCEPTED, REJECTED, ON_HOLD'),
        sa.Column('job_title', sa.String(length=255), nullable=False),
        sa.Column('job_level', sa.String(length=50), nullable=True),
        sa.Column('employment_type', sa.String(length=50), nullable=True),
        sa.Column('priority', sa.Integer(), nullable=False, server_default='3',
                  comment='1=High, 2=Medium, 3=Low'),
        sa.Column('salary_min', sa.Numeric(precision=14, scale=2), nullable=True),
        sa.Column('salary_max', sa.Numeric(precision=14, scale=2), nullable=True),
        sa.Column('currency', sa.String(length=10), nullable=False, server_default='IDR'),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('is_remote', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_favorite', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('source', sa.String(length=100), nullable=True),
        sa.Column('job_url', sa.String(length=1000), nullable=True),
        sa.Column('applied_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('response_deadline', sa.DateTime(timezone=True), nullable=True),
        sa.Column('personal_notes', sa.Text(), nullable=True),
        sa.Column('job_description', sa.Text(), nullable=True),
        sa.Column('requirements', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            'salary_min IS NULL OR salary_max IS NULL OR salary_min <= salary_max',
            name='ck_job_applications_salary_band'
        ),
    )
    op.create_index('ix_job_applications_user_id', 'job_applications', ['user_id'])
    op.create_index('ix_job_applications_company_id', 'job_applications', ['company_id'])
    op.create_index('ix_job_applications_status', 'job_applications', ['status'])
    op.create_index('idx_job_applications_user_created', 'job_applications', ['user_id', 'created_at'])
    op.create_index('idx_job_applications_user_status', 'job_applications', ['user_id', 'status'])
    op.create_index('idx_job_applications_user_applied', 'job_applications', ['user_id', 'applied_date'])

    op.create_table(
        'notes',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False,
                  server_default=sa.text("gen_random_uuid()")),
        sa.Column('job_application_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('note_date', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['job_application_id'], ['job_applications.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_notes_job_application_id', 'notes', ['job_application_id'])


def downgrade() -> None:
    op.drop_index('ix_notes_job_application_id', table_name='notes')
    op.drop_table('notes')

    op.drop_index('idx_job_applications_user_applied', table_name='job_applications')
    op.drop_index('idx_job_applications_user_status', table_name='job_applications')
    op.drop_index('idx_job_applications_user_created', table_name='job_applications')
    op.drop_index('ix_job_applications_status', table_name='job_applications')
    op.drop_index('ix_job_applications_company_id', table_name='job_applications')
    op.drop_index('ix_job_applications_user_id', table_name='job_applications')
    op.drop_table('job_applications')

    op.drop_index('ix_companies_name', table_name='companies')
    op.drop_table('companies')

    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
