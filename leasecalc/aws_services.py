"""
AWS Services Integration Module
Services: CloudWatch (Logging), SSM Parameter Store (Secrets)
"""

import logging
from datetime import datetime

import boto3
from botocore.exceptions import BotoCoreError, ClientError

# AWS Configuration
AWS_REGION = 'eu-west-1'
CLOUDWATCH_LOG_GROUP = '/leasecalc/logs'

logger = logging.getLogger(__name__)


class CloudWatchService:
    """AWS CloudWatch Service for logging"""

    def __init__(self, log_group=CLOUDWATCH_LOG_GROUP, region=AWS_REGION, enabled=False, client=None):
        self.log_group = log_group
        self.region = region
        self.enabled = enabled
        self._client = client
        self.log_stream = f"app-{datetime.utcnow().strftime('%Y-%m-%d')}"
        self._stream_ready = False

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client('logs', region_name=self.region)
        return self._client

    def _ensure_log_stream(self):
        if self._stream_ready:
            return
        try:
            self.client.create_log_stream(
                logGroupName=self.log_group,
                logStreamName=self.log_stream
            )
        except self.client.exceptions.ResourceAlreadyExistsException:
            pass
        self._stream_ready = True

    def log_event(self, message, level='INFO'):
        """Log an event locally and, when enabled, to CloudWatch"""
        logger.log(logging.getLevelName(level), message)
        if not self.enabled:
            return {'success': False, 'skipped': True}
        try:
            self._ensure_log_stream()
            log_message = f"[{level}] {datetime.utcnow().isoformat()} - {message}"
            self.client.put_log_events(
                logGroupName=self.log_group,
                logStreamName=self.log_stream,
                logEvents=[{
                    'timestamp': int(datetime.utcnow().timestamp() * 1000),
                    'message': log_message
                }]
            )
            return {'success': True}
        except (ClientError, BotoCoreError) as e:
            logger.error(f"CloudWatch error: {e}")
            return {'success': False, 'error': str(e)}


class SSMService:
    """AWS SSM Parameter Store for secrets management"""

    def __init__(self, region=AWS_REGION, client=None):
        self.region = region
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client('ssm', region_name=self.region)
        return self._client

    def get_parameter(self, name, decrypt=True):
        """Get a parameter from SSM"""
        try:
            response = self.client.get_parameter(
                Name=name,
                WithDecryption=decrypt
            )
            return {'success': True, 'value': response['Parameter']['Value']}
        except (ClientError, BotoCoreError) as e:
            logger.error(f"SSM get error: {e}")
            return {'success': False, 'error': str(e)}
