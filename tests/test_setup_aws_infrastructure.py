import boto3
from botocore.stub import Stubber

import setup_aws_infrastructure as infra


def test_ssm_parameters_skip_unset_secrets():
    names = [name for name, _, _ in infra.ssm_parameters({})]
    assert names == ['/leasecalc/environment']


def test_ssm_parameters_store_secrets_encrypted():
    parameters = infra.ssm_parameters({'SECRET_KEY': 's3cret', 'KBB_API_KEY': 'kbb'})
    assert ('/leasecalc/kbb-api-key', 'kbb', 'SecureString') in parameters
    assert ('/leasecalc/flask-secret-key', 's3cret', 'SecureString') in parameters


def test_create_ssm_parameters(aws_credentials):
    ssm = boto3.client('ssm', region_name='eu-west-1')
    with Stubber(ssm) as stubber:
        stubber.add_response(
            'put_parameter', {'Version': 1},
            {'Name': '/leasecalc/kbb-api-key', 'Value': 'kbb', 'Type': 'SecureString', 'Overwrite': True}
        )
        infra.create_ssm_parameters(ssm, [('/leasecalc/kbb-api-key', 'kbb', 'SecureString')])
        stubber.assert_no_pending_responses()


def test_create_log_group_tolerates_existing(aws_credentials):
    logs = boto3.client('logs', region_name='eu-west-1')
    with Stubber(logs) as stubber:
        stubber.add_client_error('create_log_group', 'ResourceAlreadyExistsException')
        stubber.add_response(
            'put_retention_policy', {},
            {'logGroupName': infra.CLOUDWATCH_LOG_GROUP, 'retentionInDays': 7}
        )
        infra.create_cloudwatch_log_group(logs)
        stubber.assert_no_pending_responses()
