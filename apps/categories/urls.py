from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'categories'

router = SimpleRouter()
router.register(r'', views.CategoryViewSet, basename='category')

urlpatterns = [
    # GET    /api/categories/                        - Active categories
    # GET    /api/categories/?include_inactive=true  - All categories
    # DELETE /api/categories/{id}/                   - Delete or deactivate
    path('', include(router.urls)),
]
