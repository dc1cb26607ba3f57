# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Request and response models of the public license activation endpoints."""

from dodopayments.core.model import SdkModel, SdkParams
from dodopayments.core.registry import api


class LicenseActivateParams(SdkParams):
    license_key = api(str)
    name = api(str)


class LicenseDeactivateParams(SdkParams):
    license_key = api(str)
    license_key_instance_id = api(str)


class LicenseValidateParams(SdkParams):
    license_key = api(str)
    license_key_instance_id = api(str, optional=True, nullable=True)


class LicenseValidateResponse(SdkModel):
    valid = api(bool)
