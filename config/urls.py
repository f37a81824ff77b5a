"""
Root URL configuration.
"""
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path('admin/', admin.site.urls),

    path('api/v1/cart/', include('apps.cart.interfaces.api.urls')),
    path('api/v1/products/', include('apps.products.interfaces.api.urls')),
    path('api/v1/orders/', include('apps.orders.interfaces.api.urls')),
    path('api/v1/dashboard/', include('apps.dashboard.interfaces.api.urls')),
    path('api/v1/', include('apps.outreach.interfaces.api.urls')),

    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
