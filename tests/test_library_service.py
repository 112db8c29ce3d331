import pytest

from library_app.exceptions import NotFound
from library_app.services import library_service

from .conftest import MAIN


def test_create_then_get_returns_matching_library(app_ctx):
    created = library_service.create_library(MAIN)

    fetched = library_service.get_library(created.id)
    assert fetched.name == "Main"
    assert fetched.floor_count == 3
    assert fetched.floor_area == 1000


def test_create_drops_fields_outside_whitelist(app_ctx):
    library = library_service.create_library({**MAIN, "owner": "someone"})
    assert library.name == "Main"
    assert not hasattr(library, "owner")


def test_list_libraries(app_ctx):
    library_service.create_library(MAIN)
    library_service.create_library({**MAIN, "name": "Annex"})

    assert sorted(lib.name for lib in library_service.list_libraries()) == ["Annex", "Main"]


def test_list_libraries_empty(app_ctx):
    assert library_service.list_libraries() == []


def test_get_missing_library_raises_not_found(app_ctx):
    with pytest.raises(NotFound):
        library_service.get_library(7)
