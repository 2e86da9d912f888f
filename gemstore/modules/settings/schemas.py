from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class ShippingSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enable_shipping: bool = Field(True, alias="enableShipping")
    international_shipping: bool = Field(True, alias="internationalShipping")
    single_item_shipping_cad: float = Field(18.50, alias="singleItemShippingCAD")
    single_item_shipping_usd: float = Field(14.50, alias="singleItemShippingUSD")
    combined_shipping_cad: float = Field(20.00, alias="combinedShippingCAD")
    combined_shipping_usd: float = Field(15.50, alias="combinedShippingUSD")
    combined_shipping_enabled: bool = Field(True, alias="combinedShippingEnabled")
    combined_shipping_threshold: int = Field(2, alias="combinedShippingThreshold")


class ShippingSettingsResponse(BaseModel):
    success: bool = True
    settings: ShippingSettings


class SiteSettings(ShippingSettings):
    site_name: str = Field("Gemsutopia", alias="siteName")
    site_favicon: str = Field("/favicon.ico", alias="siteFavicon")

    enable_taxes: bool = Field(True, alias="enableTaxes")
    tax_rate: float = Field(13.0, alias="taxRate")

    stripe_enabled: bool = Field(True, alias="stripeEnabled")
    paypal_enabled: bool = Field(True, alias="paypalEnabled")
    crypto_enabled: bool = Field(True, alias="cryptoEnabled")

    base_currency: str = Field("CAD", alias="baseCurrency")
    supported_currencies: List[str] = Field(["CAD", "USD", "EUR"], alias="supportedCurrencies")

    seo_title: str = Field("Gemsutopia - Premium Gemstone Collection", alias="seoTitle")
    seo_description: str = Field(
        "Hand-selected, ethically sourced gemstones from a Canadian gem dealer in Alberta.",
        alias="seoDescription",
    )
    seo_keywords: str = Field(
        "gemstones, jewelry, natural stones, precious gems, Canadian gem dealer, Alberta, ethical sourcing",
        alias="seoKeywords",
    )
    seo_author: str = Field("Gemsutopia", alias="seoAuthor")
    open_graph_title: str = Field("", alias="openGraphTitle")
    open_graph_description: str = Field("", alias="openGraphDescription")
    open_graph_image: str = Field("", alias="openGraphImage")
    twitter_title: str = Field("", alias="twitterTitle")
    twitter_description: str = Field("", alias="twitterDescription")
    twitter_image: str = Field("", alias="twitterImage")


class SiteSettingsUpdate(BaseModel):
    """Fields an admin can persist; anything else in the body is ignored"""
    model_config = ConfigDict(populate_by_name=True)

    site_name: Optional[str] = Field(None, alias="siteName")
    site_favicon: Optional[str] = Field(None, alias="siteFavicon")
    seo_title: Optional[str] = Field(None, alias="seoTitle")
    seo_description: Optional[str] = Field(None, alias="seoDescription")
    seo_keywords: Optional[str] = Field(None, alias="seoKeywords")
    seo_author: Optional[str] = Field(None, alias="seoAuthor")
    open_graph_title: Optional[str] = Field(None, alias="openGraphTitle")
    open_graph_description: Optional[str] = Field(None, alias="openGraphDescription")
    open_graph_image: Optional[str] = Field(None, alias="openGraphImage")
    twitter_title: Optional[str] = Field(None, alias="twitterTitle")
    twitter_description: Optional[str] = Field(None, alias="twitterDescription")
    twitter_image: Optional[str] = Field(None, alias="twitterImage")

    enable_shipping: Optional[bool] = Field(None, alias="enableShipping")
    international_shipping: Optional[bool] = Field(None, alias="internationalShipping")
    single_item_shipping_cad: Optional[float] = Field(None, alias="singleItemShippingCAD")
    single_item_shipping_usd: Optional[float] = Field(None, alias="singleItemShippingUSD")
    combined_shipping_cad: Optional[float] = Field(None, alias="combinedShippingCAD")
    combined_shipping_usd: Optional[float] = Field(None, alias="combinedShippingUSD")
    combined_shipping_enabled: Optional[bool] = Field(None, alias="combinedShippingEnabled")
    combined_shipping_threshold: Optional[int] = Field(None, alias="combinedShippingThreshold")


class SiteSettingsSaveResponse(BaseModel):
    success: bool = True
    settings: SiteSettings
