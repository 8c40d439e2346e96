from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Statistics tables
    path('summary/', views.summary, name='summary'),
    path('categories/', views.category_stats, name='categories'),
    path('stores/', views.store_stats, name='stores'),
    path('monthly/', views.monthly_stats, name='monthly'),
    path('daily/', views.daily_stats, name='daily'),

    # Chart series
    path('trend/', views.trend, name='trend'),

    # Dashboard
    path('dashboard/', views.dashboard, name='dashboard'),

    # CSV export
    path('export/<str:report>/', views.export_csv, name='export'),
]
