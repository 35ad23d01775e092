from .settings import DEFAULT_SETTINGS, TOKEN_LOCATIONS
from .seed_data import SAMPLE_ACTIVITIES, SAMPLE_USERS
