# storefront/api/__init__.py
# routery HTTP, aplikacje sklada storefront.main.create_app
