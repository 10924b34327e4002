import pytest
from tablestore import Store, StoreConfig


class Foo:
    pass

def bar():
    pass

# Arguments no query-taking method accepts
INVALID_QUERIES = [[bar, {'a': '1'}], Foo, Foo(), None, 'nope', False, float('nan'), 42]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ('TABLESTORE_STRICT_SELECT', 'TABLESTORE_DELETE_MODE', 'LOG_LEVEL'):
        monkeypatch.delenv(key, raising=False)

@pytest.fixture()
def store():
    return Store(['dogs', 'animals'], config=StoreConfig())

@pytest.fixture()
def dogs(store):
    dogs = store.select('dogs')
    dogs.add([
        {'id': 5, 'name': 'Bruce', 'age': 2},
        {'id': 3, 'name': 'Olive', 'age': 4},
    ])
    return dogs

@pytest.fixture()
def breeds(store):
    dogs = store.select('dogs')
    dogs.add([
        {'id': 5, 'breed': 'cocker spaniel', 'name': 'Bruce', 'age': 2},
        {'id': 4, 'breed': 'labrador', 'name': 'Albert', 'age': 10},
        {'id': 3, 'breed': 'cocker spaniel', 'name': 'Olive', 'age': 4},
    ])
    return dogs

@pytest.fixture()
def animals(store):
    animals = store.select('animals')
    animals.add([
        {'name': 'Bruce', 'animal': 'dog'},
        {'name': 'Mr Muffins', 'animal': 'cat'},
        {'name': 'Olive', 'animal': 'dog'},
    ])
    return animals
