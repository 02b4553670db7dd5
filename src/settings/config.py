"""
Build configuration: input/output paths, site defaults and rendering policies.
"""

import os
from pathlib import Path
from typing import Optional

from catalog.models import Site, SiteDefaults
from catalog.validator import INVALID_ID_POLICIES
from htmlgen.render import PLACEHOLDER_POLICIES

DEFAULT_PHONE = "02-487-9775"
DEFAULT_HOURS = "평일 07:00 - 18:00 / 주말 07:00 - 12:00"
DEFAULT_COPYRIGHT = "ⓒ 2025 DongKyung Flooring. All rights reserved."


class BuildConfig:
    """Configuration for one convert/generate run."""

    def __init__(
        self,
        root: Optional[str] = None,
        xlsx_path: str = "data/products.xlsx",
        data_path: str = "data/products.json",
        template_path: str = "templates/material.html",
        output_dir: str = "materials",
        site_defaults: Optional[SiteDefaults] = None,
        ingest_site: Optional[Site] = None,
        placeholder_image: str = "images/placeholder.jpg",
        default_category: str = "기타",
        currency_suffix: str = "원",
        index_title: str = "자재 목록",
        index_subtitle: str = "카테고리별로 정리된 기준표",
        site_name: str = "동경바닥재",
        placeholder_policy: str = "passthrough",
        invalid_id_policy: str = "abort",
    ):
        if placeholder_policy not in PLACEHOLDER_POLICIES:
            raise ValueError(f"Unknown placeholder policy: {placeholder_policy!r}")
        if invalid_id_policy not in INVALID_ID_POLICIES:
            raise ValueError(f"Unknown invalid id policy: {invalid_id_policy!r}")

        self.root = Path(root) if root else Path.cwd()
        self.xlsx_path = self.root / xlsx_path
        self.data_path = self.root / data_path
        self.template_path = self.root / template_path
        self.output_dir = self.root / output_dir

        # Rendering falls back to these; ingestion writes ingest_site verbatim
        self.site_defaults = site_defaults or SiteDefaults(phone=DEFAULT_PHONE)
        self.ingest_site = ingest_site or Site(
            phone=DEFAULT_PHONE, hours=DEFAULT_HOURS, copyright=DEFAULT_COPYRIGHT
        )

        self.placeholder_image = placeholder_image
        self.default_category = default_category
        self.currency_suffix = currency_suffix
        self.index_title = index_title
        self.index_subtitle = index_subtitle
        self.site_name = site_name
        self.placeholder_policy = placeholder_policy
        self.invalid_id_policy = invalid_id_policy

    @classmethod
    def from_env(cls, root: Optional[str] = None) -> "BuildConfig":
        """Create config from environment variables."""
        return cls(
            root=root or os.getenv("CATALOG_ROOT"),
            xlsx_path=os.getenv("CATALOG_XLSX_PATH", "data/products.xlsx"),
            data_path=os.getenv("CATALOG_DATA_PATH", "data/products.json"),
            template_path=os.getenv("CATALOG_TEMPLATE_PATH", "templates/material.html"),
            output_dir=os.getenv("CATALOG_OUTPUT_DIR", "materials"),
            site_defaults=SiteDefaults(
                phone=os.getenv("CATALOG_DEFAULT_PHONE", DEFAULT_PHONE),
                hours=os.getenv("CATALOG_DEFAULT_HOURS", ""),
                copyright=os.getenv("CATALOG_DEFAULT_COPYRIGHT", ""),
            ),
            placeholder_policy=os.getenv("CATALOG_PLACEHOLDER_POLICY", "passthrough"),
            invalid_id_policy=os.getenv("CATALOG_INVALID_ID_POLICY", "abort"),
        )

    @classmethod
    def from_config_file(
        cls, config_path: str = "catalog.conf", root: Optional[str] = None
    ) -> "BuildConfig":
        """Create config from a ``key = value`` file."""
        config = {}
        if os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#"):
                        key, value = line.split("=", 1)
                        config[key.strip()] = value.strip()

        return cls(
            root=root or config.get("root"),
            xlsx_path=config.get("xlsx_path", "data/products.xlsx"),
            data_path=config.get("data_path", "data/products.json"),
            template_path=config.get("template_path", "templates/material.html"),
            output_dir=config.get("output_dir", "materials"),
            site_defaults=SiteDefaults(
                phone=config.get("default_phone", DEFAULT_PHONE),
                hours=config.get("default_hours", ""),
                copyright=config.get("default_copyright", ""),
            ),
            placeholder_image=config.get("placeholder_image", "images/placeholder.jpg"),
            default_category=config.get("default_category", "기타"),
            currency_suffix=config.get("currency_suffix", "원"),
            index_title=config.get("index_title", "자재 목록"),
            index_subtitle=config.get("index_subtitle", "카테고리별로 정리된 기준표"),
            site_name=config.get("site_name", "동경바닥재"),
            placeholder_policy=config.get("placeholder_policy", "passthrough"),
            invalid_id_policy=config.get("invalid_id_policy", "abort"),
        )
