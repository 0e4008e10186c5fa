from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField, FloatField, SelectField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional

from leasing_lib import ComparisonInputs
from leasing_lib.lease_calculator import MAX_TERM_MONTHS

CONDITIONS = ['excellent', 'very good', 'good', 'fair', 'poor']
MAX_CAR_PRICE = 10_000_000


class ComparisonForm(FlaskForm):
    car_price = FloatField('Car Price ($)', default=30000,
                           validators=[InputRequired(), NumberRange(min=0, max=MAX_CAR_PRICE)])
    down_payment = FloatField('Down Payment ($)', default=3000, validators=[InputRequired(), NumberRange(min=0)])
    down_payment_percent = FloatField('Down Payment (%)', default=10,
                                      validators=[Optional(), NumberRange(min=0, max=100)])
    lease_payment = FloatField('Monthly Lease Payment ($)', default=400,
                               validators=[InputRequired(), NumberRange(min=0)])
    lease_term = IntegerField('Lease Term (months)', default=36,
                              validators=[InputRequired(), NumberRange(min=1, max=MAX_TERM_MONTHS)])
    lease_down_payment = FloatField('Lease Down Payment ($)', default=2000,
                                    validators=[InputRequired(), NumberRange(min=0)])
    loan_term = IntegerField('Loan Term (months)', default=60,
                             validators=[InputRequired(), NumberRange(min=1, max=MAX_TERM_MONTHS)])
    interest_rate = FloatField('Interest Rate (%)', default=4.5,
                               validators=[InputRequired(), NumberRange(min=0, max=100)])
    investment_return = FloatField('Expected Investment Return (%)', default=8,
                                   validators=[InputRequired(), NumberRange(min=-99, max=100)])
    annual_depreciation = FloatField('Annual Depreciation Rate (%)', default=15,
                                     validators=[InputRequired(), NumberRange(min=0, max=100)])

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators):
            return False
        if self.down_payment.data > self.car_price.data:
            self.down_payment.errors.append('Down payment cannot exceed the car price.')
            return False
        return True

    def to_inputs(self) -> ComparisonInputs:
        return ComparisonInputs(
            car_price=self.car_price.data,
            down_payment=self.down_payment.data,
            lease_payment=self.lease_payment.data,
            lease_term=self.lease_term.data,
            lease_down_payment=self.lease_down_payment.data,
            loan_term=self.loan_term.data,
            interest_rate=self.interest_rate.data,
            investment_return=self.investment_return.data,
            annual_depreciation=self.annual_depreciation.data,
        )


class VehicleValueForm(FlaskForm):
    year = IntegerField('Year', validators=[InputRequired(), NumberRange(min=1900, max=2100)])
    make = StringField('Make', validators=[DataRequired(), Length(max=100)])
    model = StringField('Model', validators=[DataRequired(), Length(max=100)])
    mileage = IntegerField('Mileage', default=0, validators=[Optional(), NumberRange(min=0)])
    condition = SelectField('Condition', default='excellent', choices=[(c, c.title()) for c in CONDITIONS])


class PriceEstimateForm(FlaskForm):
    year = IntegerField('Year', validators=[InputRequired(), NumberRange(min=1900, max=2100)])
    make = StringField('Make', validators=[DataRequired(), Length(max=100)])
    model = StringField('Model', validators=[DataRequired(), Length(max=100)])


class DownPaymentForm(FlaskForm):
    car_price = FloatField('Car Price ($)', validators=[InputRequired(), NumberRange(min=0, max=MAX_CAR_PRICE)])
    down_payment = FloatField('Down Payment ($)', validators=[Optional(), NumberRange(min=0)])
    down_payment_percent = FloatField('Down Payment (%)', validators=[Optional(), NumberRange(min=0, max=100)])

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators):
            return False
        if self.down_payment.data is None and self.down_payment_percent.data is None:
            self.down_payment_percent.errors.append('Enter a down payment amount or percentage.')
            return False
        if self.down_payment.data is not None and self.down_payment.data > self.car_price.data:
            self.down_payment.errors.append('Down payment cannot exceed the car price.')
            return False
        return True
