from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'stores'

router = DefaultRouter()
router.register(r'cities', views.LocalityViewSet, basename='city')
router.register(r'stores', views.StoreViewSet, basename='store')

urlpatterns = [
    # GET    /api/cities/              - List cities
    # POST   /api/cities/              - Create city
    # GET    /api/cities/{id}/stores/  - Stores in a city
    # DELETE /api/cities/{id}/         - Delete city (refused while stores exist)
    #
    # GET    /api/stores/?locality=id  - List stores
    # DELETE /api/stores/{id}/         - Delete store (refused while purchases exist)
    path('', include(router.urls)),
]
