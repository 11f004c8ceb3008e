""" Swagger configuration defined here... """

# Python Packages
from flask_restx import Api

# Constants
from ..base import constants





# Tenant header for the API
authorizations = {
    'Distributor' : {
        'type' : 'apiKey',
        'in' : 'header',
        'name' : 'X-Distributor-Id'
    }
}

if constants.APP_ENV != "production":
    doc = '/swagger/'
else:
    doc = False

# Swagger Configuration
api = Api(
    authorizations = authorizations,
    title = constants.SWAGGER_APP_PROPS['name'],
    version = constants.SWAGGER_APP_PROPS['version'],
    description = constants.SWAGGER_APP_PROPS['description'],
    doc = doc
)
