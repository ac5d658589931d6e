"""Django settings for the S2Files backend.

Settings are split into components, see ``server/settings/components``.
Values come from the environment or ``config/.env`` via python-decouple.
"""

from server.settings.components.common import *  # noqa: F403, WPS347
from server.settings.components.logging import *  # noqa: F403, WPS347
from server.settings.components.rest import *  # noqa: F403, WPS347
from server.settings.components.storages import *  # noqa: F403, WPS347
