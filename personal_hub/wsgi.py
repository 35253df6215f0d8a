"""personal_hubプロジェクトのWSGI設定。"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "personal_hub.settings")

application = get_wsgi_application()
