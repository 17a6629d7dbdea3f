"""Service selection and validation"""

from typing import List, Sequence

from ..models.result import ServiceCheck


def select_services(args: Sequence[str], canonical: Sequence[str]) -> List[str]:
    """
    Resolve the services to deploy

    Names given on the command line are used exactly as given: order and
    duplicates are kept and nothing is validated here. With no names the
    full canonical list is used.

    Args:
        args: Service names from the command line
        canonical: Canonical service list

    Returns:
        Selected service names
    """
    if args:
        return list(args)
    return list(canonical)


def classify_service(name: str, canonical: Sequence[str]) -> ServiceCheck:
    """Check a service name against the canonical list"""
    if name in canonical:
        return ServiceCheck.KNOWN
    return ServiceCheck.UNKNOWN_WARNED
