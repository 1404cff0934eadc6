from flask import Blueprint

api_bp = Blueprint("api", __name__)

# Import route modules so they register with api_bp
from . import health
from . import auth
from . import sections
from . import uploads
from . import media
from . import snapshots
