# File: library_app/forms.py
from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, IntegerField, SubmitField
from wtforms.validators import DataRequired, InputRequired

from library_app.exceptions import MissingParameter


class SignupForm(FlaskForm):
    first_name = StringField('First Name', validators=[DataRequired()])
    last_name = StringField('Last Name', validators=[DataRequired()])
    email = StringField('Email', validators=[DataRequired()])
    password = PasswordField('Password', validators=[DataRequired()])
    submit = SubmitField('Sign Up')


class LoginForm(FlaskForm):
    email = StringField('Email', validators=[DataRequired()])
    password = PasswordField('Password', validators=[DataRequired()])
    submit = SubmitField('Log In')


class LibraryForm(FlaskForm):
    name = StringField('Name', validators=[DataRequired()])
    floor_count = IntegerField('Floor Count', validators=[InputRequired()])
    floor_area = IntegerField('Floor Area', validators=[InputRequired()])
    submit = SubmitField('Create Library')


def permitted_params(form):
    """Validates a submitted form and returns only its whitelisted fields.

    Raises MissingParameter naming the fields that failed, including a
    missing CSRF token.
    """
    if not form.validate_on_submit():
        raise MissingParameter(*sorted(form.errors))
    return {name: value for name, value in form.data.items()
            if name not in ('submit', 'csrf_token')}
