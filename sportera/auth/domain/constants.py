"""Auth Domain Constants."""

ACCOUNT_NAME_MAX_LENGTH = 50
ORGANIZATION_NAME_MAX_LENGTH = 100
ORGANIZATION_DESCRIPTION_MAX_LENGTH = 500
PASSWORD_MIN_LENGTH = 6
