"""Bindle invoices and the parcels that make up a Spin application."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

SPIN_MANIFEST_MEDIA_TYPE = "application/vnd.fermyon.spin+toml"


@dataclass(frozen=True)
class Label:
    """Identifying information of a parcel."""

    name: str
    sha256: str
    media_type: str = "application/octet-stream"
    size: int = 0


@dataclass(frozen=True)
class Parcel:
    """A parcel of an invoice, with the groups it belongs to."""

    label: Label
    member_of: tuple[str, ...] | None = None
    requires: tuple[str, ...] | None = None


@dataclass
class Invoice:
    """A bindle invoice: the bindle's identity and its parcels."""

    name: str
    version: str
    parcels: list[Parcel] = field(default_factory=list)
    description: str | None = None
    authors: tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Invoice:
        """Build an invoice from its parsed TOML form."""
        try:
            bindle = data["bindle"]
            parcels = [_parcel(raw) for raw in data.get("parcel", [])]
            return cls(
                name=bindle["name"],
                version=bindle["version"],
                parcels=parcels,
                description=bindle.get("description"),
                authors=tuple(bindle.get("authors", ())),
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"invalid invoice: {exc}") from exc


def _optional_tuple(value: Any) -> tuple[str, ...] | None:
    return None if value is None else tuple(value)


def _parcel(raw: Mapping[str, Any]) -> Parcel:
    label = raw["label"]
    conditions = raw.get("conditions") or {}
    return Parcel(
        label=Label(
            name=label["name"],
            sha256=label["sha256"],
            media_type=label.get("mediaType", "application/octet-stream"),
            size=int(label.get("size", 0)),
        ),
        member_of=_optional_tuple(conditions.get("memberOf")),
        requires=_optional_tuple(conditions.get("requires")),
    )


def find_manifest(invoice: Invoice) -> str:
    """Return the SHA-256 of the invoice's single Spin manifest parcel."""
    labels = [
        parcel.label
        for parcel in invoice.parcels
        if parcel.label.media_type == SPIN_MANIFEST_MEDIA_TYPE
    ]
    if not labels:
        raise ValueError("Invoice does not contain a Spin manifest")
    if len(labels) > 1:
        raise ValueError("Invoice contains multiple Spin manifests")
    return labels[0].sha256


def is_member(parcel: Parcel, group: str) -> bool:
    """Return True if the parcel is directly a member of the group."""
    return parcel.member_of is not None and group in parcel.member_of


def parcels_in_group(invoice: Invoice, group: str) -> list[Label]:
    """Return the labels of the parcels directly in the group."""
    return [parcel.label for parcel in invoice.parcels if is_member(parcel, group)]