# autopresenter_django/__init__.py
"""Django integration for autopresenter: model mixin, presenters, template backend."""
