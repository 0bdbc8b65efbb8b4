"""Initial skills and resumes schema

Revision ID: 0001_initial_skills
Revises: 
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_skills'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'skill_categories',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('color', sa.String(length=20), nullable=True),
        sa.Column('icon', sa.String(length=20), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_skill_categories_name', 'skill_categories', ['name'], unique=True)

    op.create_table(
        'skills',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('skill_type', sa.String(length=10), nullable=False, server_default='hard'),
        sa.Column('max_level', sa.Integer(), nullable=False, server_default='10'),
        sa.Column('icon', sa.String(length=20), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('max_level >= 1', name='ck_skills_max_level_positive'),
        sa.CheckConstraint("skill_type IN ('hard', 'soft')", name='ck_skills_skill_type'),
        sa.ForeignKeyConstraint(['category_id'], ['skill_categories.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_skills_name', 'skills', ['name'], unique=True)
    op.create_index('ix_skills_category_id', 'skills', ['category_id'])
    op.create_index('ix_skills_skill_type', 'skills', ['skill_type'])

    op.create_table(
        'skill_tree_nodes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('skill_id', sa.Integer(), nullable=False),
        sa.Column('parent_skill_id', sa.Integer(), nullable=True),
        sa.Column('position_x', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('position_y', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('tier', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('unlock_requirement', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['skill_id'], ['skills.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['parent_skill_id'], ['skills.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('skill_id'),
    )
    op.create_index('ix_skill_tree_nodes_parent_skill_id', 'skill_tree_nodes', ['parent_skill_id'])
    op.create_index('idx_skill_tree_layout', 'skill_tree_nodes', ['tier', 'position_y', 'position_x'])

    op.create_table(
        'user_skills',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('skill_id', sa.Integer(), nullable=False),
        sa.Column('level', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('experience_points', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('unlocked_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        *_timestamps(),
        sa.CheckConstraint('level >= 0', name='ck_user_skills_level_non_negative'),
        sa.CheckConstraint('experience_points >= 0', name='ck_user_skills_experience_non_negative'),
        sa.ForeignKeyConstraint(['skill_id'], ['skills.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'skill_id', name='uq_user_skills_user_skill'),
    )
    op.create_index('ix_user_skills_user_id', 'user_skills', ['user_id'])
    op.create_index('ix_user_skills_skill_id', 'user_skills', ['skill_id'])

    op.create_table(
        'job_experiences',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('company', sa.String(length=255), nullable=False),
        sa.Column('position', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('skills_gained', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_job_experiences_user_id', 'job_experiences', ['user_id'])
    op.create_index('ix_job_experiences_start_date', 'job_experiences', ['start_date'])

    op.create_table(
        'skill_unlocks',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('job_experience_id', sa.Integer(), nullable=False),
        sa.Column('skill_id', sa.Integer(), nullable=False),
        sa.Column('level_granted', sa.Integer(), nullable=False),
        sa.Column('experience_points_granted', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['job_experience_id'], ['job_experiences.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['skill_id'], ['skills.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_skill_unlocks_job_experience_id', 'skill_unlocks', ['job_experience_id'])
    op.create_index('ix_skill_unlocks_skill_id', 'skill_unlocks', ['skill_id'])

    op.create_table(
        'resumes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_resumes_user_id', 'resumes', ['user_id'])

    # No FK to user_skills: deleting a ledger row leaves associations behind
    op.create_table(
        'resume_skills',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('resume_id', sa.Integer(), nullable=False),
        sa.Column('skill_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['resume_id'], ['resumes.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['skill_id'], ['skills.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('resume_id', 'skill_id', name='uq_resume_skills_resume_skill'),
    )
    op.create_index('ix_resume_skills_resume_id', 'resume_skills', ['resume_id'])
    op.create_index('ix_resume_skills_skill_id', 'resume_skills', ['skill_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('resume_skills')
    op.drop_table('resumes')
    op.drop_table('skill_unlocks')
    op.drop_table('job_experiences')
    op.drop_table('user_skills')
    op.drop_table('skill_tree_nodes')
    op.drop_table('skills')
    op.drop_table('skill_categories')
