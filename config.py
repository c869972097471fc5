# config.py

# AWS profile name (None uses the default credential chain)
SSO_PROFILE = None

# Organizations is a global service homed in us-east-1
DEFAULT_REGION = 'us-east-1'

# Role session name used when assuming a delegated role
SESSION_NAME = 'control-aws'

# Role assumed in member accounts (e.g. OrganizationAccountAccessRole)
ASSUME_ROLE_NAME = 'OrganizationAccountAccessRole'

# Maximum number of accounts whose tags are fetched at the same time
MAX_CONCURRENT_ACCOUNTS = 10

# Retry settings handed to botocore
MAX_RETRIES = 10
RETRY_MODE = 'standard'

# Account tag key -> Account field
TAG_FIELDS = {
    'catapult.controlant.com/environment': 'environment',
    'catapult.controlant.com/tier': 'tier',
    'catapult.controlant.com/domain': 'domain',
}

LOG_FILE = 'control_aws.log'
LOG_LEVEL = 'INFO'
