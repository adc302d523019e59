from django.urls import path
from . import views

urlpatterns = [
    path('reset', views.reset, name='reset'),
    path('current', views.current_singer, name='current_singer'),
    path('next', views.next_singer, name='next_singer'),
    path('previous', views.previous_singer, name='previous_singer'),
    path('singers', views.show_singers, name='show_singers'),
    path('spotlight', views.spotlight, name='spotlight'),
    path('updates', views.updates, name='updates'),
    path('add', views.add_singer, name='add_singer'),
    path('add-priority', views.add_priority_singer, name='add_priority_singer'),
    path('remove', views.remove_singer, name='remove_singer'),
    path('bump', views.bump_singer, name='bump_singer'),
    path('signup_disabled', views.signup_disabled, name='signup_disabled'),
    path('enable_signup', views.enable_signup, name='enable_signup'),
    path('disable_signup', views.disable_signup, name='disable_signup'),
]
