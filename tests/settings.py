SECRET_KEY = 'bs-calendar-tests'

INSTALLED_APPS = [
    'bs_calendar',
]

DATABASES = {}

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'APP_DIRS': True,
    },
]

USE_TZ = True
TIME_ZONE = 'Asia/Kathmandu'
