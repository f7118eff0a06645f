from django.urls import path
from . import views

app_name = 'treemenu'

urlpatterns = [
    # Dashboard
    path('', views.dashboard, name='dashboard'),

    # Menu group toggling
    path('menu/toggle/<str:name>/', views.toggle_group, name='toggle_group'),

    # Resource list screens; must stay last so it does not shadow the routes above
    path('<str:name>/', views.resource_list, name='resource_list'),
]
