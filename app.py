import logging
import os

from flask import Flask
from werkzeug.exceptions import HTTPException

from leasecalc.aws_services import AWS_REGION, CLOUDWATCH_LOG_GROUP, CloudWatchService, SSMService
from leasecalc.routes import main, api, handle_http_error
from leasecalc.valuation import KBB_API_URL, VehicleValuationService
from leasing_lib.vehicle_catalog import VPIC_API_URL, VehicleCatalog

DEFAULT_SECRET_KEY = 'leasecalc-secret-key'


def _env_flag(name):
    return os.environ.get(name, '').lower() in ('1', 'true', 'yes', 'on')


def load_secret_key(config, ssm_service):
    """Secret key from config, else from SSM Parameter Store, else the development default"""
    if config.get('SECRET_KEY'):
        return config['SECRET_KEY']
    if config.get('SECRET_KEY_PARAMETER'):
        result = ssm_service.get_parameter(config['SECRET_KEY_PARAMETER'])
        if result['success']:
            return result['value']
        logging.warning("Could not read SECRET_KEY from SSM, using the development key")
    return DEFAULT_SECRET_KEY


def create_app(overrides=None):
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY')
    app.config['SECRET_KEY_PARAMETER'] = os.environ.get('SECRET_KEY_PARAMETER')
    app.config['KBB_API_KEY'] = os.environ.get('KBB_API_KEY')
    app.config['KBB_API_URL'] = os.environ.get('KBB_API_URL', KBB_API_URL)
    app.config['KBB_API_KEY_PARAMETER'] = os.environ.get('KBB_API_KEY_PARAMETER')
    app.config['VPIC_API_URL'] = os.environ.get('VPIC_API_URL', VPIC_API_URL)
    app.config['HTTP_TIMEOUT'] = float(os.environ.get('HTTP_TIMEOUT', 10))
    app.config['AWS_REGION'] = os.environ.get('AWS_REGION', AWS_REGION)
    app.config['CLOUDWATCH_ENABLED'] = _env_flag('CLOUDWATCH_ENABLED')
    app.config['CLOUDWATCH_LOG_GROUP'] = os.environ.get('CLOUDWATCH_LOG_GROUP', CLOUDWATCH_LOG_GROUP)
    app.config['PORT'] = int(os.environ.get('PORT', 3001))
    app.config.update(overrides or {})

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Initialize services
    ssm_service = SSMService(region=app.config['AWS_REGION'])
    app.config['SECRET_KEY'] = load_secret_key(app.config, ssm_service)
    app.extensions['leasecalc'] = {
        'cloudwatch': CloudWatchService(
            log_group=app.config['CLOUDWATCH_LOG_GROUP'],
            region=app.config['AWS_REGION'],
            enabled=app.config['CLOUDWATCH_ENABLED']
        ),
        'ssm': ssm_service,
        'valuation': VehicleValuationService(
            api_url=app.config['KBB_API_URL'],
            api_key=app.config['KBB_API_KEY'],
            timeout=app.config['HTTP_TIMEOUT'],
            ssm_service=ssm_service,
            api_key_parameter=app.config['KBB_API_KEY_PARAMETER']
        ),
        'catalog': VehicleCatalog(
            base_url=app.config['VPIC_API_URL'],
            timeout=app.config['HTTP_TIMEOUT']
        ),
    }

    # Register blueprints
    app.register_blueprint(main)
    app.register_blueprint(api, url_prefix='/api')
    app.register_error_handler(HTTPException, handle_http_error)

    return app

app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=app.config['PORT'], debug=True)
