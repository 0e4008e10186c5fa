"""
AWS Infrastructure Setup Script
Creates the AWS resources the Buy vs. Lease calculator reads at runtime

Services Created:
1. CloudWatch Log Group - For application logging
2. SSM Parameters - For the Flask secret key and the valuation API key
"""

import os

import boto3

# Configuration
AWS_REGION = os.environ.get('AWS_REGION', 'eu-west-1')
CLOUDWATCH_LOG_GROUP = '/leasecalc/logs'
LOG_RETENTION_DAYS = 7
SSM_PREFIX = '/leasecalc'


def create_cloudwatch_log_group(logs):
    """Create CloudWatch log group"""
    print(f"Creating CloudWatch log group: {CLOUDWATCH_LOG_GROUP}...")
    try:
        logs.create_log_group(logGroupName=CLOUDWATCH_LOG_GROUP)
        print(f"✓ CloudWatch log group created: {CLOUDWATCH_LOG_GROUP}")
    except logs.exceptions.ResourceAlreadyExistsException:
        print(f"✓ CloudWatch log group already exists: {CLOUDWATCH_LOG_GROUP}")

    logs.put_retention_policy(
        logGroupName=CLOUDWATCH_LOG_GROUP,
        retentionInDays=LOG_RETENTION_DAYS
    )


def ssm_parameters(environ=os.environ):
    """Parameters to store, skipping secrets that are not set locally"""
    parameters = [
        (f'{SSM_PREFIX}/environment', environ.get('LEASECALC_ENVIRONMENT', 'production'), 'String'),
    ]
    if environ.get('SECRET_KEY'):
        parameters.append((f'{SSM_PREFIX}/flask-secret-key', environ['SECRET_KEY'], 'SecureString'))
    if environ.get('KBB_API_KEY'):
        parameters.append((f'{SSM_PREFIX}/kbb-api-key', environ['KBB_API_KEY'], 'SecureString'))
    return parameters


def create_ssm_parameters(ssm, parameters):
    """Create SSM parameters for secrets"""
    print("Creating SSM parameters...")
    for name, value, param_type in parameters:
        ssm.put_parameter(
            Name=name,
            Value=value,
            Type=param_type,
            Overwrite=True
        )
        print(f"✓ SSM parameter created: {name}")


def main():
    """Main function to create all AWS resources"""
    print("=" * 60)
    print("AWS Infrastructure Setup for Buy vs. Lease Calculator")
    print("=" * 60)
    print(f"Region: {AWS_REGION}")
    print("=" * 60)

    logs = boto3.client('logs', region_name=AWS_REGION)
    ssm = boto3.client('ssm', region_name=AWS_REGION)

    create_cloudwatch_log_group(logs)
    parameters = ssm_parameters()
    create_ssm_parameters(ssm, parameters)

    print("=" * 60)
    print("Infrastructure setup complete!")
    print("=" * 60)
    print(f"  - CloudWatch Log Group: {CLOUDWATCH_LOG_GROUP}")
    for name, _, _ in parameters:
        print(f"  - SSM Parameter: {name}")
    print(f"\nSet KBB_API_KEY_PARAMETER={SSM_PREFIX}/kbb-api-key and CLOUDWATCH_ENABLED=1 to use them.")


if __name__ == '__main__':
    main()
