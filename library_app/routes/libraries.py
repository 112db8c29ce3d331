# File: library_app/routes/libraries.py
from flask import Blueprint, render_template, redirect, url_for, flash
from library_app.forms import LibraryForm, permitted_params
from library_app.services import library_service

bp = Blueprint('libraries', __name__, url_prefix='/libraries')


@bp.route('')
def index():
    """Display list of libraries"""
    libraries = library_service.list_libraries()
    return render_template('libraries/index.html', title="Libraries", libraries=libraries)


@bp.route('/new')
def new():
    """Display the library creation form"""
    return render_template('libraries/new.html', title="New Library", form=LibraryForm())


@bp.route('', methods=['POST'])
def create():
    """Process library creation form data and create the library"""
    library_params = permitted_params(LibraryForm())
    library = library_service.create_library(library_params)
    flash(f"Library '{library.name}' created.", 'success')
    return redirect(url_for('libraries.index'))


@bp.route('/<int:id>')
def show(id):
    library = library_service.get_library(id)
    return render_template('libraries/show.html', title=library.name, library=library)
