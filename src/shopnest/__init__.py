"""ShopNest storefront demo package."""
