"""create users, surveys, responses and training applications

Revision ID: 0a1b2c3d4e5f
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = '0a1b2c3d4e5f'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


user_role = sa.Enum('EMPLOYEE', 'MANAGER', 'ADMIN', name='userrole')
survey_status = sa.Enum('DRAFT', 'ACTIVE', 'COMPLETED', 'ARCHIVED', name='surveystatus')
question_type = sa.Enum(
    'TEXT', 'TEXTAREA', 'SINGLE_CHOICE', 'MULTIPLE_CHOICE', 'RATING', 'DATE',
    name='questiontype',
)
response_status = sa.Enum('IN_PROGRESS', 'COMPLETED', name='responsestatus')
application_type = sa.Enum('TRAINING_REQUEST', 'WORKSHOP_PROPOSAL', name='applicationtype')
application_status = sa.Enum(
    'PENDING', 'UNDER_REVIEW', 'APPROVED', 'REJECTED', 'COMPLETED',
    name='applicationstatus',
)
application_priority = sa.Enum('LOW', 'MEDIUM', 'HIGH', 'URGENT', name='applicationpriority')


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('role', user_role, nullable=False),
        sa.Column('department', sa.String(), nullable=True),
        sa.Column('position', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_department', 'users', ['department'])

    op.create_table(
        'surveys',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', survey_status, nullable=False),
        sa.Column('created_by_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_surveys_id', 'surveys', ['id'])
    op.create_index('ix_surveys_title', 'surveys', ['title'])
    op.create_index('ix_surveys_status', 'surveys', ['status'])
    op.create_index('ix_surveys_created_by_id', 'surveys', ['created_by_id'])

    op.create_table(
        'questions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('survey_id', sa.Integer(), sa.ForeignKey('surveys.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('type', question_type, nullable=False),
        sa.Column('options', sa.JSON(), nullable=True),
        sa.Column('required', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('order', sa.Integer(), nullable=False),
    )
    op.create_index('ix_questions_id', 'questions', ['id'])
    op.create_index('ix_questions_survey_id', 'questions', ['survey_id'])

    op.create_table(
        'survey_responses',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('survey_id', sa.Integer(), sa.ForeignKey('surveys.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('status', response_status, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint('survey_id', 'user_id', name='uq_survey_responses_survey_user'),
    )
    op.create_index('ix_survey_responses_id', 'survey_responses', ['id'])
    op.create_index('ix_survey_responses_survey_id', 'survey_responses', ['survey_id'])
    op.create_index('ix_survey_responses_user_id', 'survey_responses', ['user_id'])
    op.create_index('ix_survey_responses_created_at', 'survey_responses', ['created_at'])

    op.create_table(
        'answers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('response_id', sa.Integer(), sa.ForeignKey('survey_responses.id', ondelete='CASCADE'), nullable=False),
        sa.Column('question_id', sa.Integer(), sa.ForeignKey('questions.id', ondelete='CASCADE'), nullable=False),
        sa.Column('answer', sa.JSON(), nullable=True),
    )
    op.create_index('ix_answers_id', 'answers', ['id'])
    op.create_index('ix_answers_response_id', 'answers', ['response_id'])
    op.create_index('ix_answers_question_id', 'answers', ['question_id'])

    op.create_table(
        'training_applications',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('application_type', application_type, nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('priority', application_priority, nullable=False),
        sa.Column('justification', sa.Text(), nullable=False),
        sa.Column('expected_outcome', sa.Text(), nullable=True),
        sa.Column('preferred_dates', sa.JSON(), nullable=True),
        sa.Column('duration', sa.String(), nullable=True),
        sa.Column('budget', sa.Numeric(12, 2), nullable=True),
        sa.Column('participants', sa.Integer(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('provider', sa.String(), nullable=True),
        sa.Column('status', application_status, nullable=False),
        sa.Column('manager_approval', sa.Boolean(), nullable=True),
        sa.Column('hr_approval', sa.Boolean(), nullable=True),
        sa.Column('admin_comments', sa.Text(), nullable=True),
        sa.Column('submitted_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_training_applications_id', 'training_applications', ['id'])
    op.create_index('ix_training_applications_user_id', 'training_applications', ['user_id'])
    op.create_index('ix_training_applications_application_type', 'training_applications', ['application_type'])
    op.create_index('ix_training_applications_priority', 'training_applications', ['priority'])
    op.create_index('ix_training_applications_status', 'training_applications', ['status'])
    op.create_index('ix_training_applications_submitted_at', 'training_applications', ['submitted_at'])


def downgrade() -> None:
    op.drop_table('training_applications')
    op.drop_table('answers')
    op.drop_table('survey_responses')
    op.drop_table('questions')
    op.drop_table('surveys')
    op.drop_table('users')

    bind = op.get_bind()
    for enum in (application_priority, application_status, application_type,
                 response_status, question_type, survey_status, user_role):
        enum.drop(bind, checkfirst=True)
