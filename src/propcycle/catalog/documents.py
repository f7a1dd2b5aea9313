# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Document type catalog.

Regular workflows use stages 1-10 and subdivision uses stages 10-16. Stage 10
(`registered_title`) belongs to both: a registered title is the last step of
an acquisition and the prerequisite of a subdivision.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import model_validator

from ..core.primitives.model import Model
from ..core.primitives.types import StageNumber

REGISTERED_TITLE = "registered_title"


class DocumentTypeDefinition(Model):
    """A kind of document that can be attached to a property."""

    key: str
    label: str
    description: str = ""
    required: bool = False
    stage: StageNumber
    multiple: bool = False


DOC_TYPES: Tuple[DocumentTypeDefinition, ...] = (
    # Regular workflows (stages 1-10)
    DocumentTypeDefinition(
        key="title_copy",
        label="Copy of Title/Title Number",
        description="Original title deed or certified copy with title number",
        required=True,
        stage=1,
    ),
    DocumentTypeDefinition(
        key="property_images",
        label="Property Images",
        description="Photographs of the property (exterior, interior, boundaries)",
        required=True,
        stage=2,
        multiple=True,
    ),
    DocumentTypeDefinition(
        key="search_certificate",
        label="Search Certificate",
        description="Official property search from the Ministry of Lands",
        required=True,
        stage=3,
    ),
    DocumentTypeDefinition(
        key="minutes_decision",
        label="Minutes/Decision to Buy",
        description="Meeting minutes documenting the decision to buy",
        required=True,
        stage=4,
    ),
    DocumentTypeDefinition(
        key="original_title_deed",
        label="Original Title Deed",
        description="Original title deed handed over by the seller",
        required=True,
        stage=5,
    ),
    DocumentTypeDefinition(
        key="seller_id_passport",
        label="Seller ID/Passport",
        description="Identification of the seller",
        required=True,
        stage=5,
    ),
    DocumentTypeDefinition(
        key="spousal_consent",
        label="Spousal Consent",
        description="Consent of the seller's spouse where applicable",
        stage=5,
    ),
    DocumentTypeDefinition(
        key="spouse_id_kra",
        label="Spouse ID & KRA PIN",
        description="Identification and tax PIN of the consenting spouse",
        stage=5,
    ),
    DocumentTypeDefinition(
        key="signed_lra33",
        label="Signed LRA 33",
        description="Signed land transfer form",
        required=True,
        stage=5,
    ),
    DocumentTypeDefinition(
        key="agreement_seller",
        label="Agreement with Seller",
        description="Signed purchase agreement or sale contract",
        required=True,
        stage=5,
    ),
    DocumentTypeDefinition(
        key="lcb_consent",
        label="LCB Consent",
        description="Land Control Board consent for the transaction",
        required=True,
        stage=6,
    ),
    DocumentTypeDefinition(
        key="valuation_report",
        label="Valuation Report",
        description="Professional property valuation report",
        required=True,
        stage=7,
    ),
    DocumentTypeDefinition(
        key="assessment",
        label="Assessment",
        description="Property assessment documentation",
        required=True,
        stage=8,
    ),
    DocumentTypeDefinition(
        key="stamp_duty",
        label="Stamp Duty Payment",
        description="Stamp duty payment receipts and confirmation",
        required=True,
        stage=9,
        multiple=True,
    ),
    # Shared: last regular stage, first subdivision stage
    DocumentTypeDefinition(
        key=REGISTERED_TITLE,
        label="Registered Title",
        description="Registered title deed after transfer completion",
        stage=10,
    ),
    # Subdivision only (stages 11-16)
    DocumentTypeDefinition(
        key="minutes_decision_subdivision",
        label="Minutes/Decision to Subdivide",
        description="Meeting minutes documenting the decision to subdivide",
        required=True,
        stage=11,
    ),
    DocumentTypeDefinition(
        key="search_certificate_subdivision",
        label="Search Certificate (Subdivision)",
        description="Official search for the parcel being subdivided",
        required=True,
        stage=12,
    ),
    DocumentTypeDefinition(
        key="lcb_consent_subdivision",
        label="LCB Consent (Subdivision)",
        description="Land Control Board consent to subdivide",
        required=True,
        stage=13,
    ),
    DocumentTypeDefinition(
        key="mutation_forms",
        label="Mutation Forms",
        description="Approved mutation forms for the new parcels",
        required=True,
        stage=14,
    ),
    DocumentTypeDefinition(
        key="beaconing_docs",
        label="Beaconing Documents",
        description="Survey beaconing records for the new parcels",
        required=True,
        stage=15,
        multiple=True,
    ),
    DocumentTypeDefinition(
        key="title_registration_subdivision",
        label="New Title Registration",
        description="Registered titles for the subdivided parcels",
        required=True,
        stage=16,
        multiple=True,
    ),
)

SUBDIVISION_DOC_KEYS: Tuple[str, ...] = (
    REGISTERED_TITLE,
    "minutes_decision_subdivision",
    "search_certificate_subdivision",
    "lcb_consent_subdivision",
    "mutation_forms",
    "beaconing_docs",
    "title_registration_subdivision",
)


class DocumentCatalog(Model):
    """
    The process-wide document catalog.

    Attributes:
        doc_types: All document types, in display order
        subdivision_keys: Keys visible in the subdivision workflow
        shared_key: The one subdivision key also visible in regular workflows
    """

    doc_types: Tuple[DocumentTypeDefinition, ...] = DOC_TYPES
    subdivision_keys: Tuple[str, ...] = SUBDIVISION_DOC_KEYS
    shared_key: str = REGISTERED_TITLE

    @model_validator(mode="after")
    def check_keys(self) -> "DocumentCatalog":
        keys = [doc.key for doc in self.doc_types]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ValueError(f"Duplicate document keys: {duplicates}")
        missing = [key for key in self.subdivision_keys if key not in keys]
        if missing:
            raise ValueError(f"Subdivision keys not in catalog: {missing}")
        if self.shared_key not in self.subdivision_keys:
            raise ValueError(f"Shared key '{self.shared_key}' must be a subdivision key")
        return self

    @property
    def keys(self) -> List[str]:
        return [doc.key for doc in self.doc_types]

    @property
    def subdivision_only_keys(self) -> List[str]:
        return [key for key in self.subdivision_keys if key != self.shared_key]

    @property
    def regular_keys(self) -> List[str]:
        excluded = set(self.subdivision_only_keys)
        return [doc.key for doc in self.doc_types if doc.key not in excluded]

    @property
    def required_keys(self) -> List[str]:
        return [doc.key for doc in self.doc_types if doc.required]

    def get_doc_type(self, key: str) -> Optional[DocumentTypeDefinition]:
        for doc in self.doc_types:
            if doc.key == key:
                return doc
        return None

    def subdivision_doc_types(self) -> List[DocumentTypeDefinition]:
        allowed = set(self.subdivision_keys)
        return [doc for doc in self.doc_types if doc.key in allowed]

    def regular_doc_types(self) -> List[DocumentTypeDefinition]:
        excluded = set(self.subdivision_only_keys)
        return [doc for doc in self.doc_types if doc.key not in excluded]


DEFAULT_DOCUMENT_CATALOG = DocumentCatalog()
REGULAR_DOC_KEYS: Tuple[str, ...] = tuple(DEFAULT_DOCUMENT_CATALOG.regular_keys)
