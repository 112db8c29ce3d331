# File: library_app/services/library_service.py
from flask import current_app
from library_app import repositories

LIBRARY_FIELDS = ('name', 'floor_count', 'floor_area')


def list_libraries():
    return repositories.libraries.list()


def get_library(library_id):
    return repositories.libraries.get_by_id(library_id)


def create_library(fields):
    permitted = {key: fields[key] for key in LIBRARY_FIELDS if key in fields}
    library = repositories.libraries.create(**permitted)
    current_app.logger.info(f"Library_Service.py - create_library(): Created library {library.id} ('{library.name}').")
    return library
