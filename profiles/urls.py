"""
URL configuration for profiles app.
"""

from django.urls import path
from . import views

app_name = 'profiles'

urlpatterns = [
    path('', views.edit_profile, name='edit_profile'),
    path('photo/', views.change_photo, name='change_photo'),
    path('phone-mask/', views.phone_mask, name='phone_mask'),
    path('validate/<str:field_id>/', views.validate_field, name='validate_field'),
]
