from flask import Blueprint, current_app, jsonify, render_template, request
from werkzeug.datastructures import MultiDict
from werkzeug.exceptions import HTTPException

from leasing_lib import LeaseBuyCalculator, PriceEstimator, model_years
from leasing_lib.price_estimator import down_payment_from_percent, percent_from_down_payment

from .forms import ComparisonForm, DownPaymentForm, PriceEstimateForm, VehicleValueForm

main = Blueprint('main', __name__, template_folder='templates')
api = Blueprint('api', __name__)

calculator = LeaseBuyCalculator()
price_estimator = PriceEstimator()


def _service(name):
    return current_app.extensions['leasecalc'][name]


def json_formdata():
    """Request JSON body as form data WTForms can parse"""
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        payload = {}
    return MultiDict({k: str(v) for k, v in payload.items() if v is not None})


def api_form(form_class):
    return form_class(formdata=json_formdata(), meta={'csrf': False})


# Main Routes
@main.route('/', methods=['GET', 'POST'])
def index():
    form = ComparisonForm()
    comparison = None
    if form.validate_on_submit():
        inputs = form.to_inputs()
        comparison = calculator.compare(inputs)
        _service('cloudwatch').log_event(
            f"Comparison run: price={inputs.car_price} loan_term={inputs.loan_term} "
            f"lease_term={inputs.lease_term} -> {comparison.recommendation}", "INFO"
        )
        form.down_payment_percent.data = inputs.down_payment_percent
    return render_template(
        'index.html',
        form=form,
        years=model_years(),
        comparison=comparison,
        summary=comparison.summary() if comparison else None,
        chart=comparison.chart_data() if comparison else None,
    )


# API Routes
@api.route('/vehicle-value', methods=['POST'])
def vehicle_value():
    form = api_form(VehicleValueForm)
    if not form.validate():
        return jsonify({'error': 'Failed to fetch vehicle value', 'errors': form.errors}), 500

    result = _service('valuation').get_vehicle_value(
        form.year.data,
        form.make.data,
        form.model.data,
        mileage=form.mileage.data or 0,
        condition=form.condition.data
    )
    if not result['success']:
        _service('cloudwatch').log_event(f"Vehicle value lookup failed: {result['error']}", "ERROR")
        return jsonify({'error': 'Failed to fetch vehicle value'}), 500
    return jsonify(result['data'])


@api.route('/years')
def years():
    return jsonify({'years': model_years()})


@api.route('/makes')
def makes():
    result = _service('catalog').get_makes(request.args.get('year', '').strip())
    if not result['success']:
        _service('cloudwatch').log_event(f"Makes lookup failed: {result['error']}", "ERROR")
        return jsonify({'error': 'Failed to fetch makes'}), 502
    return jsonify({'makes': result['makes']})


@api.route('/models')
def models():
    result = _service('catalog').get_models(
        request.args.get('year', '').strip(),
        request.args.get('make', '').strip()
    )
    if not result['success']:
        _service('cloudwatch').log_event(f"Models lookup failed: {result['error']}", "ERROR")
        return jsonify({'error': 'Failed to fetch models'}), 502
    return jsonify({'models': result['models']})


@api.route('/estimate-price', methods=['POST'])
def estimate_price():
    form = api_form(PriceEstimateForm)
    if not form.validate():
        return jsonify({'errors': form.errors}), 400
    return jsonify(price_estimator.estimate(form.year.data, form.make.data, form.model.data))


@api.route('/compare', methods=['POST'])
def compare():
    form = api_form(ComparisonForm)
    if not form.validate():
        return jsonify({'errors': form.errors}), 400

    inputs = form.to_inputs()
    comparison = calculator.compare(inputs)
    _service('cloudwatch').log_event(
        f"API comparison run: loan_term={inputs.loan_term} -> {comparison.recommendation}", "INFO"
    )
    summary = comparison.summary()
    summary['down_payment_percent'] = inputs.down_payment_percent
    return jsonify({'summary': summary, 'chart': comparison.chart_data()})


@api.route('/down-payment', methods=['POST'])
def down_payment():
    form = api_form(DownPaymentForm)
    if not form.validate():
        return jsonify({'errors': form.errors}), 400

    price = form.car_price.data
    if form.down_payment.data is not None:
        amount = form.down_payment.data
        percent = percent_from_down_payment(price, amount)
    else:
        percent = form.down_payment_percent.data
        amount = down_payment_from_percent(price, percent)
    return jsonify({'car_price': price, 'down_payment': amount, 'down_payment_percent': percent})


def handle_http_error(e: HTTPException):
    """JSON errors under /api, the default error page elsewhere"""
    if request.path.startswith('/api/'):
        return jsonify({'error': e.description}), e.code
    return e
