"""
Printful Sync Product Tool

Modules:
    models      - Data models (CatalogProduct, CatalogVariant, UploadedFile, SyncProductRequest)
    common      - Shared utilities (logging, settings loader, constants)
    printful    - Printful REST API client
    workflow    - Image scanner and the ordered sync pipeline
"""
