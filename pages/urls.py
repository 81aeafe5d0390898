from django.urls import path

from .views import advertise_with_us, analytics, home, learn

urlpatterns = [
    path("", home, name="home"),
    path("advertise-with-us/", advertise_with_us, name="advertise_with_us"),
    path("analytics/", analytics, name="analytics"),
    path("learn/", learn, name="learn_index"),
    path("learn/<path:slug>/", learn, name="learn"),
]
