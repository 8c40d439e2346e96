from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'purchases'

router = SimpleRouter()
router.register(r'', views.PurchaseViewSet, basename='purchase')

urlpatterns = [
    # GET    /api/purchases/          - List purchases (filters: category, store, date_from, date_to, search)
    # POST   /api/purchases/          - Record purchase
    # GET    /api/purchases/{id}/     - Get purchase
    # PUT    /api/purchases/{id}/     - Update purchase
    # PATCH  /api/purchases/{id}/     - Partial update
    # DELETE /api/purchases/{id}/     - Delete purchase
    # GET    /api/purchases/export/   - JSON export
    path('', include(router.urls)),
]
