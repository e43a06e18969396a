from flask import Blueprint

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)

# Import route modules so they register with v1_bp
from . import health
from . import auth
from . import dashboard
from . import blogs
from . import seo_banners
from . import portfolios
from . import contacts
from . import uploads
