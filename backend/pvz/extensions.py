# Overview: Shared Flask-SQLAlchemy handle and Flask-Migrate hook for the PVZ schema.

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

db = SQLAlchemy()
migrate = Migrate()
