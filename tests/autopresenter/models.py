"""Plain-Python presentable models shared by the core tests."""

from autopresenter import Presentable, Presenter, presents


class ItemPresenter(Presenter):
    @presents
    def name(self, value):
        return value.upper()


class Item(Presentable):
    presenter_class = ItemPresenter

    def __init__(self, id, name):
        self.id = id
        self.name = name


class User(Presentable):
    def __init__(self, id, name, manager=None, reports=(), tags=(), slug=""):
        self.id = id
        self.name = name
        self.manager = manager
        self.reports = list(reports)
        self.tags = list(tags)
        self.slug = slug

    def foo(self, a, b):
        return (self.id, a + b)

    def __eq__(self, other):
        return isinstance(other, User) and other.id == self.id

    def __hash__(self):
        return hash(self.id)


class Article(Presentable):
    route_key_name = "slug"

    def __init__(self, slug, title):
        self.slug = slug
        self.title = title


class Plain:
    """Not presentable."""

    def __init__(self, value):
        self.value = value
