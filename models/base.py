"""
Database Base Module

Creates the SQLAlchemy database instance that all models inherit from.
This is separate to avoid circular imports.
"""

import uuid
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy

# Create the SQLAlchemy instance
# This will be initialized with the Flask app in create_app()
db = SQLAlchemy()


def new_id():
    """String primary key for all models."""
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc)
