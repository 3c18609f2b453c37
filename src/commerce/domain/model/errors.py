"""Catalog of business-rule errors, one namespace per aggregate.

Codes are part of the public contract; callers match on them.
"""

from __future__ import annotations

from commerce.domain.result import Error


class ProductErrors:
    NOT_FOUND = Error("Product.NotFound", "Product was not found.")

    # Creation
    INVALID_NAME = Error("Product.InvalidName", "Product name cannot be empty.")
    INVALID_SKU = Error("Product.InvalidSku", "SKU cannot be empty.")

    # Status transitions
    ALREADY_ACTIVE = Error("Product.AlreadyActive", "Product is already active.")
    NOT_ACTIVE = Error(
        "Product.NotActive", "Product must be active to perform this operation."
    )
    INVALID_STATUS = Error(
        "Product.InvalidStatus", "Product status does not allow this operation."
    )
    ALREADY_DISCONTINUED = Error(
        "Product.AlreadyDiscontinued", "Product is already discontinued."
    )
    DISCONTINUED_CANNOT_BE_MODIFIED = Error(
        "Product.DiscontinuedCannotBeModified",
        "Discontinued products cannot be modified.",
    )

    # Category changes
    CATEGORY_UNCHANGED = Error(
        "Product.CategoryUnchanged",
        "New category is the same as the current category.",
    )
    INVALID_CATEGORY_ID = Error(
        "Product.InvalidCategoryId", "CategoryId cannot be empty."
    )

    # Price changes
    PRICE_UNCHANGED = Error(
        "Product.PriceUnchanged", "New price is the same as the current price."
    )
    INVALID_PRICE = Error(
        "Product.InvalidPrice",
        "Price must be valid and greater than or equal to zero.",
    )

    # Features
    INVALID_FEATURE_ID = Error("Product.InvalidFeatureId", "FeatureId cannot be empty.")
    FEATURE_NOT_FOUND = Error(
        "Product.FeatureNotFound", "Feature was not found for this product."
    )
    DUPLICATE_FEATURE_ID = Error(
        "Product.DuplicateFeatureId", "FeatureId must be unique within the product."
    )
    FEATURE_ALREADY_EXISTS = Error(
        "Product.FeatureAlreadyExists",
        "A feature with the same name already exists for this product.",
    )
    INVALID_FEATURE_NAME = Error(
        "Product.InvalidFeatureName", "Feature name cannot be empty."
    )
    INVALID_FEATURE_VALUE = Error(
        "Product.InvalidFeatureValue", "Feature value cannot be empty."
    )


class OrderErrors:
    NOT_FOUND = Error("Order.NotFound", "Order was not found.")
    INVALID_STATE = Error(
        "Order.InvalidState", "Order is in an invalid state for this operation."
    )

    # Creation / items
    INVALID_CUSTOMER_EMAIL = Error(
        "Order.InvalidCustomerEmail", "Customer email is required."
    )
    ORDER_ITEMS_CANNOT_BE_NULL = Error(
        "Order.OrderItemsCannotBeNull", "Order items cannot be null."
    )
    EMPTY_ORDER = Error("Order.EmptyOrder", "Order must contain at least one item.")
    INVALID_QUANTITY = Error(
        "Order.InvalidQuantity", "Item quantity must be a positive whole number."
    )
    CURRENCY_MISMATCH = Error(
        "Order.CurrencyMismatch", "All order items must have the same currency."
    )
    PRODUCT_NOT_AVAILABLE = Error(
        "Order.ProductNotAvailable", "Only active products can be ordered."
    )

    # Submit / pay / cancel
    NOT_CREATED = Error(
        "Order.NotCreated", "Only created orders can be submitted for payment."
    )
    NOT_AWAITING_PAYMENT = Error(
        "Order.NotAwaitingPayment",
        "Only orders awaiting payment can be marked as paid.",
    )
    ALREADY_CANCELLED = Error("Order.AlreadyCancelled", "Order is already cancelled.")
    CANNOT_CANCEL_PAID_ORDER = Error(
        "Order.CannotCancelPaidOrder", "Paid orders cannot be cancelled."
    )


class PaymentErrors:
    NOT_FOUND = Error("Payment.NotFound", "Payment was not found.")
    INVALID_STATE = Error(
        "Payment.InvalidState", "Payment is in an invalid state for this operation."
    )

    # Creation
    INVALID_ORDER_ID = Error("Payment.InvalidOrderId", "OrderId cannot be empty.")
    INVALID_AMOUNT = Error(
        "Payment.InvalidAmount", "Payment amount must be greater than zero."
    )
    PROVIDER_REQUIRED = Error("Payment.ProviderRequired", "Provider is required.")
    IDEMPOTENCY_KEY_REQUIRED = Error(
        "Payment.IdempotencyKeyRequired", "Idempotency key is required."
    )
    IDEMPOTENCY_KEY_CONFLICT = Error(
        "Payment.IdempotencyKeyConflict",
        "Idempotency key is already used by a payment for another order.",
    )

    # Outcome reporting
    PROVIDER_REFERENCE_REQUIRED = Error(
        "Payment.ProviderReferenceRequired", "Provider reference is required."
    )
    CONFLICTING_PROVIDER_REFERENCE = Error(
        "Payment.ConflictingProviderReference",
        "Payment already succeeded with a different provider reference.",
    )
    CANNOT_SUCCEED_FAILED_PAYMENT = Error(
        "Payment.CannotSucceedFailedPayment",
        "Cannot mark a failed payment as succeeded.",
    )
    CANNOT_FAIL_SUCCEEDED_PAYMENT = Error(
        "Payment.CannotFailSucceededPayment",
        "Cannot mark a succeeded payment as failed.",
    )
