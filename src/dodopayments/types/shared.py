# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Enums and models shared by several API resources."""

from dodopayments.core.model import SdkEnum, SdkModel
from dodopayments.core.registry import api


class Currency(str, SdkEnum):
    """ISO 4217 currency codes accepted by the API."""

    AED = "AED"
    ARS = "ARS"
    AUD = "AUD"
    BDT = "BDT"
    BRL = "BRL"
    CAD = "CAD"
    CHF = "CHF"
    CLP = "CLP"
    CNY = "CNY"
    COP = "COP"
    CZK = "CZK"
    DKK = "DKK"
    EGP = "EGP"
    EUR = "EUR"
    GBP = "GBP"
    HKD = "HKD"
    HUF = "HUF"
    IDR = "IDR"
    ILS = "ILS"
    INR = "INR"
    JPY = "JPY"
    KES = "KES"
    KRW = "KRW"
    MXN = "MXN"
    MYR = "MYR"
    NGN = "NGN"
    NOK = "NOK"
    NZD = "NZD"
    PEN = "PEN"
    PHP = "PHP"
    PKR = "PKR"
    PLN = "PLN"
    RON = "RON"
    SAR = "SAR"
    SEK = "SEK"
    SGD = "SGD"
    THB = "THB"
    TRY = "TRY"
    TWD = "TWD"
    UAH = "UAH"
    USD = "USD"
    VND = "VND"
    ZAR = "ZAR"


class CountryCode(str, SdkEnum):
    """ISO 3166-1 alpha-2 country codes."""

    AE = "AE"
    AR = "AR"
    AT = "AT"
    AU = "AU"
    BD = "BD"
    BE = "BE"
    BG = "BG"
    BR = "BR"
    CA = "CA"
    CH = "CH"
    CL = "CL"
    CN = "CN"
    CO = "CO"
    CY = "CY"
    CZ = "CZ"
    DE = "DE"
    DK = "DK"
    EE = "EE"
    EG = "EG"
    ES = "ES"
    FI = "FI"
    FR = "FR"
    GB = "GB"
    GR = "GR"
    HK = "HK"
    HR = "HR"
    HU = "HU"
    ID = "ID"
    IE = "IE"
    IL = "IL"
    IN = "IN"
    IT = "IT"
    JP = "JP"
    KE = "KE"
    KR = "KR"
    LT = "LT"
    LU = "LU"
    LV = "LV"
    MT = "MT"
    MX = "MX"
    MY = "MY"
    NG = "NG"
    NL = "NL"
    NO = "NO"
    NZ = "NZ"
    PE = "PE"
    PH = "PH"
    PK = "PK"
    PL = "PL"
    PT = "PT"
    RO = "RO"
    SA = "SA"
    SE = "SE"
    SG = "SG"
    SI = "SI"
    SK = "SK"
    TH = "TH"
    TR = "TR"
    TW = "TW"
    UA = "UA"
    US = "US"
    VN = "VN"
    ZA = "ZA"


class TaxCategory(str, SdkEnum):
    """Tax category applied to a product."""

    DIGITAL_PRODUCTS = "digital_products"
    SAAS = "saas"
    E_BOOK = "e_book"
    EDTECH = "edtech"


class TimeInterval(str, SdkEnum):
    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"


class BillingAddress(SdkModel):
    """Billing address details for payments and subscriptions."""

    city = api(str)
    country = api(enum=CountryCode)
    state = api(str)
    street = api(str)
    zipcode = api(str)
