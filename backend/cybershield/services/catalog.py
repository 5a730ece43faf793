"""
Service catalog.

WHAT: The fixed, ordered list of consulting services shown on the site.

WHY: The catalog changes with a release, not at runtime, so it lives in
code instead of the data directory.
"""

from typing import List

from cybershield.schemas.catalog import ServiceDescriptor


SERVICES: List[ServiceDescriptor] = [
    ServiceDescriptor(
        id=1,
        name="Penetration Testing",
        description="Simulated cyber attacks to identify vulnerabilities",
        icon="bug",
        features=[
            "Web Application Testing",
            "Network Penetration Testing",
            "Mobile Application Security",
            "Wireless Network Assessment",
        ],
    ),
    ServiceDescriptor(
        id=2,
        name="Vulnerability Assessment",
        description="Comprehensive analysis of security posture",
        icon="search",
        features=[
            "Automated Vulnerability Scanning",
            "Manual Security Review",
            "Risk Assessment & Prioritization",
            "Remediation Guidance",
        ],
    ),
    ServiceDescriptor(
        id=3,
        name="Social Engineering",
        description="Test organization's human firewall",
        icon="user-secret",
        features=[
            "Phishing Simulation",
            "Physical Penetration Testing",
            "Security Awareness Training",
            "Vishing Tests",
        ],
    ),
    ServiceDescriptor(
        id=4,
        name="Security Auditing",
        description="Independent evaluation of security controls",
        icon="file-contract",
        features=[
            "ISO 27001 Compliance",
            "PCI DSS Assessment",
            "GDPR Compliance Check",
            "HIPAA Security Review",
        ],
    ),
    ServiceDescriptor(
        id=5,
        name="Security Consulting",
        description="Expert guidance on security architecture",
        icon="headset",
        features=[
            "Security Architecture Review",
            "Incident Response Planning",
            "Security Policy Development",
            "Cloud Security Assessment",
        ],
    ),
    ServiceDescriptor(
        id=6,
        name="Managed Security",
        description="Ongoing monitoring and threat detection",
        icon="shield-alt",
        features=[
            "24/7 Security Monitoring",
            "Threat Intelligence",
            "Incident Response",
            "Vulnerability Management",
        ],
    ),
]


def list_services() -> List[ServiceDescriptor]:
    """Return the catalog in display order."""
    return list(SERVICES)
