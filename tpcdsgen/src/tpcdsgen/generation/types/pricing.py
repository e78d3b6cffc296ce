"""Line item pricing for sales and returns."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from tpcdsgen.generation.random.stream import RandomNumberStream
from tpcdsgen.generation.random.values import (
    generate_uniform_random_decimal,
    generate_uniform_random_int,
)

CENT = Decimal("0.01")
ZERO = Decimal("0.00")
ONE = Decimal("1.00")

QUANTITY_MAX = 100
WHOLESALE_MIN = Decimal("1.00")
WHOLESALE_MAX = Decimal("100.00")
MARKUP_MAX = Decimal("2.00")
DISCOUNT_MAX = Decimal("1.00")
TAX_MAX = Decimal("0.09")
COUPON_PERCENT = 20

# Draws taken from the pricing stream per line item
PRICING_SEEDS = 7


def money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Pricing:
    quantity: int
    wholesale_cost: Decimal
    list_price: Decimal
    sales_price: Decimal
    ext_discount_amt: Decimal
    ext_sales_price: Decimal
    ext_wholesale_cost: Decimal
    ext_list_price: Decimal
    tax_percentage: Decimal
    ext_tax: Decimal
    coupon_amt: Decimal
    net_paid: Decimal
    net_paid_inc_tax: Decimal
    net_profit: Decimal


def generate_pricing(stream: RandomNumberStream) -> Pricing:
    """Price one line item; always takes ``PRICING_SEEDS`` draws."""
    quantity = generate_uniform_random_int(1, QUANTITY_MAX, stream)
    wholesale_cost = generate_uniform_random_decimal(WHOLESALE_MIN, WHOLESALE_MAX, stream)
    markup = generate_uniform_random_decimal(ZERO, MARKUP_MAX, stream)
    discount = generate_uniform_random_decimal(ZERO, DISCOUNT_MAX, stream)
    tax_percentage = generate_uniform_random_decimal(ZERO, TAX_MAX, stream)
    coupon_roll = generate_uniform_random_int(1, 100, stream)
    coupon_share = generate_uniform_random_decimal(ZERO, ONE, stream)

    list_price = money(wholesale_cost * (ONE + markup))
    sales_price = money(list_price * (ONE - discount))
    ext_list_price = list_price * quantity
    ext_sales_price = sales_price * quantity
    ext_wholesale_cost = wholesale_cost * quantity
    ext_discount_amt = ext_list_price - ext_sales_price
    coupon_amt = money(ext_sales_price * coupon_share) if coupon_roll <= COUPON_PERCENT else ZERO
    net_paid = ext_sales_price - coupon_amt
    ext_tax = money(net_paid * tax_percentage)

    return Pricing(
        quantity=quantity,
        wholesale_cost=wholesale_cost,
        list_price=list_price,
        sales_price=sales_price,
        ext_discount_amt=ext_discount_amt,
        ext_sales_price=ext_sales_price,
        ext_wholesale_cost=ext_wholesale_cost,
        ext_list_price=ext_list_price,
        tax_percentage=tax_percentage,
        ext_tax=ext_tax,
        coupon_amt=coupon_amt,
        net_paid=net_paid,
        net_paid_inc_tax=net_paid + ext_tax,
        net_profit=net_paid - ext_wholesale_cost,
    )


# Draws taken from the return pricing stream per returned line item
RETURN_PRICING_SEEDS = 4
FEE_MIN = Decimal("0.50")
FEE_MAX = Decimal("100.00")
SHIP_COST_SHARE = Decimal("0.50")


@dataclass(frozen=True)
class ReturnPricing:
    quantity: int
    return_amt: Decimal
    return_tax: Decimal
    return_amt_inc_tax: Decimal
    fee: Decimal
    return_ship_cost: Decimal
    refunded_cash: Decimal
    reversed_charge: Decimal
    store_credit: Decimal
    net_loss: Decimal


def generate_return_pricing(sale: Pricing, stream: RandomNumberStream) -> ReturnPricing:
    """
    Price the return of part of a line item.

    The refund is split three ways: cash, reversed charge and store credit.
    Always takes ``RETURN_PRICING_SEEDS`` draws.
    """
    quantity = generate_uniform_random_int(1, sale.quantity, stream)
    fee = generate_uniform_random_decimal(FEE_MIN, FEE_MAX, stream)
    cash_percent = generate_uniform_random_int(0, 100, stream)
    credit_percent = generate_uniform_random_int(0, 100, stream)

    return_amt = sale.sales_price * quantity
    return_tax = money(return_amt * sale.tax_percentage)
    return_amt_inc_tax = return_amt + return_tax
    return_ship_cost = money(sale.wholesale_cost * quantity * SHIP_COST_SHARE)

    refunded_cash = money(return_amt_inc_tax * cash_percent / 100)
    remaining = return_amt_inc_tax - refunded_cash
    store_credit = money(remaining * credit_percent / 100)
    reversed_charge = remaining - store_credit

    return ReturnPricing(
        quantity=quantity,
        return_amt=return_amt,
        return_tax=return_tax,
        return_amt_inc_tax=return_amt_inc_tax,
        fee=fee,
        return_ship_cost=return_ship_cost,
        refunded_cash=refunded_cash,
        reversed_charge=reversed_charge,
        store_credit=store_credit,
        net_loss=fee + return_ship_cost + return_tax,
    )
