from __future__ import annotations

import sys
from pathlib import Path

import django
from django.conf import settings

# ---------------------------------------------------------------------------
# Import helpers: ensure the workspace packages are importable when the
# tests run in isolation (without editable installs).
# ---------------------------------------------------------------------------

ROOT = Path(__file__).resolve().parents[1]
PKG_ROOT = ROOT / "packages"
for path in (ROOT, PKG_ROOT / "autopresenter/src", PKG_ROOT / "autopresenter_django/src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

DUMMY_APP = "tests.autopresenter_django.fixtures.dummyapp"

TEST_TEMPLATES = {
    "customer.html": "{{ customer.first_name }} {{ customer.last_name }}",
    "owner.html": "{{ site_owner.full_name }} @ {{ site_name }}",
    "order.html": "{{ order.reference }}:{% for item in order.items.all %} {{ item.sku }}x{{ item.quantity }}{% endfor %}",
}


def pytest_configure(config):
    """Configure Django settings for tests."""
    if settings.configured:
        return
    settings.configure(
        INSTALLED_APPS=[
            "django.contrib.contenttypes",
            "django.contrib.auth",
            "autopresenter_django",  # package under test
            DUMMY_APP,
        ],
        DATABASES={"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}},
        DEFAULT_AUTO_FIELD="django.db.models.AutoField",
        SECRET_KEY="test-secret-key",
        USE_TZ=True,
        TEMPLATES=[
            {
                "NAME": "presenters",
                "BACKEND": "autopresenter_django.backends.PresenterTemplates",
                "DIRS": [],
                "APP_DIRS": False,
                "OPTIONS": {
                    "context_processors": [f"{DUMMY_APP}.context_processors.site"],
                    "loaders": [("django.template.loaders.locmem.Loader", TEST_TEMPLATES)],
                },
            },
            {
                "NAME": "plain",
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "DIRS": [],
                "APP_DIRS": False,
                "OPTIONS": {
                    "loaders": [("django.template.loaders.locmem.Loader", TEST_TEMPLATES)],
                },
            },
        ],
    )
    django.setup()
