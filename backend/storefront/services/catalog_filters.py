"""
目录过滤器 - pure shaping and filtering of store records.

Nothing here touches the store; every function returns new dicts and leaves
the records it was given untouched.
"""

import math
from typing import Any, Dict, List, Optional, Union

PRODUCT_LIST_LIMIT = 14

# Fields never shown in product listings
LISTING_HIDDEN_FIELDS = ('_id', 'description')


def to_number(value: Any) -> Optional[Union[int, float]]:
    """Coerce a stored scalar to a number, keeping whole values as int.

    Missing values count as 0. Values with no numeric reading (text, NaN,
    containers) give None, which serialises as null.
    """
    if value is None:
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def _without(record: Dict[str, Any], fields) -> Dict[str, Any]:
    return {key: value for key, value in record.items() if key not in fields}


def _in_price_range(product: Dict[str, Any], lower: float, upper: float) -> bool:
    try:
        cost = float(product.get('cost'))
    except (TypeError, ValueError):
        return False
    return lower <= cost <= upper


def comments_for_product(comments: List[Dict[str, Any]], product_id: str) -> List[Dict[str, Any]]:
    """Comments of one product, in store order, without their product_id."""
    collected = []
    for comment in comments:
        if comment.get('product_id') != product_id:
            continue
        item = _without(comment, ('product_id',))
        item['score'] = to_number(item.get('score'))
        collected.append(item)
    return collected


def product_detail(product: Dict[str, Any], category: Dict[str, Any]) -> Dict[str, Any]:
    """Product without its store id, with the category name in place of its id."""
    detail = _without(product, ('_id',))
    detail['category'] = category['name']
    return detail


def listing_entry(product: Dict[str, Any]) -> Dict[str, Any]:
    return _without(product, LISTING_HIDDEN_FIELDS)


def filter_products(
    products: List[Dict[str, Any]],
    category: Optional[int] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    limit: int = PRODUCT_LIST_LIMIT,
    category_filter_enabled: bool = False,
) -> List[Dict[str, Any]]:
    """Products for GET /products.

    Default mode keeps the long-standing listing behaviour:
    - the category is matched against the accumulator before it holds any
      product, so a category alone never narrows (nor fills) the result
    - a price bound (either one) selects every product in [min, max]
    - without any price bound the result is empty

    With ``category_filter_enabled`` the category narrows the full product
    set and price bounds are optional.

    At most ``limit`` entries are returned; extra entries are dropped from
    the tail.
    """
    lower = min_price if min_price is not None else 0
    upper = max_price if max_price is not None else math.inf

    if category_filter_enabled:
        listing = [
            listing_entry(p) for p in products
            if (category is None or p.get('category') == category)
            and _in_price_range(p, lower, upper)
        ]
        return listing[:limit]

    collected: List[Dict[str, Any]] = []

    if category is not None:
        # Runs on the empty accumulator
        collected = [p for p in collected if p.get('category') == category]

    if min_price is not None or max_price is not None:
        collected = [listing_entry(p) for p in products if _in_price_range(p, lower, upper)]

    return collected[:limit]
