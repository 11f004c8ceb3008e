""" All Application Constants declare here... """

# Python Packages
from decouple import config, Csv


# App Constants
APP_ENV                         =   config('APP_ENV', default = 'development')
APP_SECRET_KEY                  =   config('APP_SECRET_KEY', default = 'change-me')
APP_LOG_LEVEL                   =   config('APP_LOG_LEVEL', default = 'INFO')
APP_CORS_ORIGINS                =   config('APP_CORS_ORIGINS', default = '*', cast = Csv())


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "Feather Storefront",
                                "version": "1.0",
                                "description": "Per-distributor business logic scripts: \
                                storage, ordering and evaluation at storefront \
                                trigger points."
                            }


# Database Constants
DB_HOST                         =   config('DB_HOST', default = 'localhost')
DB_PORT                         =   config('DB_PORT', default = '5432')
DB_NAME                         =   config('DB_NAME', default = 'feather')
DB_USER                         =   config('DB_USER', default = 'feather')
DB_PASSWORD                     =   config('DB_PASSWORD', default = '')

# Full URI wins over the individual DB_* parts when set
DATABASE_URL                    =   config('DATABASE_URL', default = '')


# Logic Script Constants
TRIGGER_POINTS                  =   (
                                        "storefront_load",
                                        "quantity_change",
                                        "add_to_cart",
                                        "submit",
                                    )

TRIGGER_POINT_LABELS            =   {
                                        "storefront_load": "Storefront Load",
                                        "quantity_change": "Quantity Change",
                                        "add_to_cart": "Add to Cart",
                                        "submit": "Submit Order",
                                    }

LOGIC_SCRIPTS_FAIL_OPEN         =   config('LOGIC_SCRIPTS_FAIL_OPEN', default = True, cast = bool)
LOGIC_SCRIPTS_CACHE_TTL         =   config('LOGIC_SCRIPTS_CACHE_TTL', default = 300, cast = int)
LOGIC_SCRIPT_MAX_LENGTH         =   config('LOGIC_SCRIPT_MAX_LENGTH', default = 10_000, cast = int)
LOGIC_SCRIPT_MAX_STATEMENTS     =   config('LOGIC_SCRIPT_MAX_STATEMENTS', default = 100, cast = int)
LOGIC_SCRIPT_MAX_VALUE_SIZE     =   config('LOGIC_SCRIPT_MAX_VALUE_SIZE', default = 100_000, cast = int)
LOGIC_SCRIPT_MAX_INT_BITS       =   config('LOGIC_SCRIPT_MAX_INT_BITS', default = 256, cast = int)
LOGIC_SCRIPT_DEFAULT_DENY_MESSAGE   =   "Action blocked by business rule"
LOGIC_SCRIPT_FAIL_CLOSED_MESSAGE    =   "This action is temporarily unavailable. Please try again later."


# AI Provider Constants
AI_PROVIDER                     =   config('AI_PROVIDER', default = 'anthropic')

ANTHROPIC_API_KEY               =   config('ANTHROPIC_API_KEY', default = '')
ANTHROPIC_DEFAULT_MODEL         =   config('ANTHROPIC_DEFAULT_MODEL', default = 'claude-sonnet-4-20250514')

OPENAI_API_KEY		            =	config('OPENAI_API_KEY', default = '')
OPENAI_DEFAULT_MODEL            =   config('OPENAI_DEFAULT_MODEL', default = 'gpt-4o-mini')
