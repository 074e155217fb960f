"""
Sync Pipeline

Runs the one-shot Printful workflow in a fixed order:

    1. fetch catalog products
    2. select one product by index
    3. fetch its variants
    4. find a local image file
    5. look up the store
    6. upload the image
    7. create the sync product referencing the uploaded file

Every step returns a StepResult. The first failure stops the run and is
reported in the SyncOutcome; nothing here exits the process.
"""

import functools
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..common.config_loader import SyncSettings
from ..models import (
    CatalogProduct,
    CatalogVariant,
    StepResult,
    SyncProductRequest,
    SyncVariant,
    UploadedFile,
)
from ..printful.api_client import PrintfulAPIClient, PrintfulAPIError, PrintfulResponse
from .image_scanner import content_type_for, find_image_files

logger = logging.getLogger(__name__)

# Steps whose failures are reported against the selected product
SYNC_STAGE_STEPS = {"fetch_store", "upload_image", "create_sync_product"}


def _dump(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _step(name: str):
    """Turn API and file errors raised inside a step into a failed StepResult."""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> StepResult:
            try:
                return func(*args, **kwargs)
            except (PrintfulAPIError, OSError) as e:
                return StepResult.failure(name, str(e))
        return wrapper
    return decorator


@dataclass
class SyncOutcome:
    """Final result of a pipeline run plus every intermediate value."""
    ok: bool = False
    error: str = ""
    failed_step: str = ""
    products: List[CatalogProduct] = field(default_factory=list)
    product: Optional[CatalogProduct] = None
    variants: List[CatalogVariant] = field(default_factory=list)
    image_path: Optional[Path] = None
    store_id: Optional[int] = None
    uploaded_file: Optional[UploadedFile] = None
    sync_result: Any = None


class SyncPipeline:
    """
    Ordered Printful catalog → upload → sync product workflow.

    Usage:
        with PrintfulAPIClient(access_token=token) as client:
            pipeline = SyncPipeline(client, load_sync_settings(), directory=".")
            outcome = pipeline.run()
            sys.exit(0 if outcome.ok else 1)
    """

    def __init__(
        self,
        client: PrintfulAPIClient,
        settings: SyncSettings,
        directory: str | Path = ".",
        inspect_name: Optional[str] = None,
        strict: bool = False,
    ):
        """
        Initialize the pipeline.

        Args:
            client: Authenticated Printful client
            settings: Selection policy and listing template
            directory: Directory scanned for artwork
            inspect_name: Log catalog products with exactly this name (no effect on selection)
            strict: Treat a rejected sync-product response as a failure
        """
        self.client = client
        self.settings = settings
        self.directory = Path(directory)
        self.inspect_name = inspect_name
        self.strict = strict

    # -- steps ---------------------------------------------------------------

    @_step("fetch_catalog")
    def fetch_catalog(self) -> StepResult:
        response = self.client.list_catalog_products()
        if not response.ok:
            return self._http_failure("fetch_catalog", "Failed to fetch products", response)

        body = response.json()
        logger.debug("API Response: %s", _dump(body))

        products = body.get("data") if isinstance(body, dict) else None
        if not isinstance(products, list):
            logger.error("Expected products to be an array, got: %s", type(products).__name__)
            return StepResult.failure(
                "fetch_catalog",
                f"Expected products to be an array, got {type(products).__name__}",
            )
        if not all(isinstance(p, dict) for p in products):
            return StepResult.failure("fetch_catalog", "Unexpected product entry in catalog response")

        if products:
            logger.debug("Keys of the first product: %s", ", ".join(products[0].keys()))

        if self.inspect_name:
            self._log_named_products(products)

        logger.info("Fetched %d catalog products", len(products))
        return StepResult.success("fetch_catalog", [CatalogProduct.from_api(p) for p in products])

    def select_product(self, products: List[CatalogProduct]) -> StepResult:
        index = self.settings.product_index
        if index < 0 or index >= len(products):
            return StepResult.failure(
                "select_product",
                f"Catalog has only {len(products)} products; cannot select index {index}",
            )

        product = products[index]
        logger.info("Selected product #%d: %s (ID: %s)", index, product.name, product.id)
        return StepResult.success("select_product", product)

    @_step("fetch_variants")
    def fetch_variants(self, product: CatalogProduct) -> StepResult:
        response = self.client.list_catalog_variants(product.id)
        if not response.ok:
            return self._http_failure(
                "fetch_variants", f"Failed to fetch variants for {product.name}", response,
            )

        body = response.json()
        logger.debug("Variant data: %s", _dump(body))

        raw_variants = body.get("data") if isinstance(body, dict) else None
        if not raw_variants or not isinstance(raw_variants, list):
            logger.error("No variants found for %s", product.name)
            return StepResult.failure("fetch_variants", f"No variants found for {product.name}")

        variants = [CatalogVariant.from_api(v) for v in raw_variants if isinstance(v, dict)]
        if not variants:
            logger.error("No usable variant entries for %s", product.name)
            return StepResult.failure("fetch_variants", f"No variants found for {product.name}")

        logger.info("Found %d variants for %s", len(variants), product.name)
        return StepResult.success("fetch_variants", variants)

    @_step("find_image")
    def find_image(self) -> StepResult:
        names = find_image_files(self.directory, self.settings.image_extensions)
        if not names:
            logger.error("No image files found in %s", self.directory)
            return StepResult.failure("find_image", f"No image files found in {self.directory}")

        logger.info("Using image file: %s", names[0])
        return StepResult.success("find_image", self.directory / names[0])

    @_step("fetch_store")
    def fetch_store(self) -> StepResult:
        logger.info("Getting store info...")
        body = self.client.list_stores().json()
        logger.info("Store result: %s", _dump(body))

        stores = body.get("result") if isinstance(body, dict) else None
        first = stores[0] if isinstance(stores, list) and stores else None
        store_id = first.get("id") if isinstance(first, dict) else None
        if not store_id:
            return StepResult.failure("fetch_store", "Failed to get store ID")

        logger.debug("Store ID: %s", store_id)
        return StepResult.success("fetch_store", store_id)

    @_step("upload_image")
    def upload_image(self, path: Path) -> StepResult:
        logger.info("Uploading file: %s", path.name)
        response = self.client.upload_file(path, content_type_for(path.name))
        logger.info("Raw response: %s", response.text)

        body = response.json()
        logger.info("File upload result: %s", _dump(body))

        result = body.get("result") if isinstance(body, dict) else None
        if not isinstance(result, dict) or not result.get("id"):
            return StepResult.failure("upload_image", "Failed to get file ID from upload response")

        uploaded = UploadedFile(id=result["id"], url=result.get("url") or "")
        logger.info("Uploaded file ID %s: %s", uploaded.id, uploaded.url)
        return StepResult.success("upload_image", uploaded)

    def build_sync_request(self, uploaded: UploadedFile) -> SyncProductRequest:
        """Listing from settings and the uploaded file only."""
        s = self.settings
        return SyncProductRequest(
            external_id=s.external_id,
            name=s.name,
            variants=[
                SyncVariant(
                    external_id=s.variant_external_id,
                    variant_id=s.variant_id,
                    retail_price=s.retail_price,
                    file_url=uploaded.url,
                ),
            ],
        )

    @_step("create_sync_product")
    def create_sync_product(self, uploaded: UploadedFile) -> StepResult:
        payload = self.build_sync_request(uploaded).to_payload()
        logger.debug("Sync product payload: %s", _dump(payload))

        response = self.client.create_sync_product(payload)
        body = response.json()
        logger.info("Sync product result: %s", _dump(body))

        if self._is_rejected(response, body):
            logger.warning(
                "Printful rejected sync product %s (HTTP %d)",
                self.settings.external_id, response.status_code,
            )
            if self.strict:
                return StepResult.failure(
                    "create_sync_product",
                    f"Sync product {self.settings.external_id} rejected (HTTP {response.status_code})",
                )

        return StepResult.success("create_sync_product", body)

    # -- driver --------------------------------------------------------------

    def run(self) -> SyncOutcome:
        """Run every step in order, stopping at the first failure."""
        outcome = SyncOutcome()

        result = self.fetch_catalog()
        if not result.ok:
            return self._fail(outcome, result)
        outcome.products = result.value

        result = self.select_product(outcome.products)
        if not result.ok:
            return self._fail(outcome, result)
        outcome.product = result.value

        result = self.fetch_variants(outcome.product)
        if not result.ok:
            return self._fail(outcome, result)
        outcome.variants = result.value

        result = self.find_image()
        if not result.ok:
            return self._fail(outcome, result)
        outcome.image_path = result.value

        result = self.fetch_store()
        if not result.ok:
            return self._fail(outcome, result)
        outcome.store_id = result.value

        result = self.upload_image(outcome.image_path)
        if not result.ok:
            return self._fail(outcome, result)
        outcome.uploaded_file = result.value

        result = self.create_sync_product(outcome.uploaded_file)
        if not result.ok:
            return self._fail(outcome, result)
        outcome.sync_result = result.value

        outcome.ok = True
        return outcome

    # -- helpers -------------------------------------------------------------

    def _fail(self, outcome: SyncOutcome, result: StepResult) -> SyncOutcome:
        error = result.error
        if result.step in SYNC_STAGE_STEPS and outcome.product is not None:
            error = f"Error syncing {outcome.product.name}: {error}"
        outcome.ok = False
        outcome.error = error
        outcome.failed_step = result.step
        return outcome

    @staticmethod
    def _http_failure(step: str, message: str, response: PrintfulResponse) -> StepResult:
        logger.error(message)
        logger.error("Response status: %d", response.status_code)
        logger.error("Response text: %s", response.text)
        return StepResult.failure(step, f"{message} (HTTP {response.status_code})")

    @staticmethod
    def _is_rejected(response: PrintfulResponse, body: Any) -> bool:
        if not response.ok:
            return True
        code = body.get("code") if isinstance(body, dict) else None
        return isinstance(code, int) and code >= 400

    def _log_named_products(self, products: List[Dict[str, Any]]) -> None:
        matches = [p for p in products if p.get("name") == self.inspect_name]
        if not matches:
            logger.info("No catalog product named %r on this page", self.inspect_name)
        for product in matches:
            logger.info("Product: %s", _dump(product))
