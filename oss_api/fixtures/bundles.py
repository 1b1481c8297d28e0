"""
Starter bundle catalogue: pre-packaged sets of government services that
fast-track common investment scenarios.
"""

from oss_api.models.domain import ServiceItem, StarterBundle


def _service(service_id, name, agency, days, fee, required=True, description=None):
    return ServiceItem(
        service_id=service_id,
        service_name=name,
        agency=agency,
        processing_days=days,
        fee=fee,
        required=required,
        description=description,
    )


# Shared registrations every bundle starts with.
def _core_registrations() -> list[ServiceItem]:
    return [
        _service("SRV-001", "Company Registration (RJSC)", "RJSC", 5, 500,
                 description="Register your company with RJSC"),
        _service("SRV-002", "Trade License", "City Corporation", 7, 300,
                 description="Municipal trade license for business operations"),
        _service("SRV-003", "TIN Registration", "NBR", 3, 0,
                 description="Tax Identification Number"),
    ]


def build_bundles() -> list[StarterBundle]:
    return [
        StarterBundle(
            bundle_id="BUNDLE-001",
            name="Manufacturing Quick Start",
            name_local="উৎপাদন দ্রুত শুরু",
            description=(
                "Complete package for setting up a manufacturing unit in Bangladesh. "
                "Includes all essential registrations, permits, and clearances."
            ),
            target_sectors=["Manufacturing", "Textiles", "Pharmaceuticals"],
            target_investment_size="medium",
            services=_core_registrations() + [
                _service("SRV-004", "Environmental Clearance", "DoE", 15, 1000,
                         description="Environmental compliance certificate"),
                _service("SRV-005", "Factory License", "DIFE", 10, 400,
                         description="License to operate factory"),
                _service("SRV-006", "Fire Safety Certificate", "Fire Service", 7, 250),
                _service("SRV-007", "Import Registration Certificate (IRC)", "CCI&E", 5, 350,
                         required=False),
            ],
            total_savings=580,
            total_days=52,
            fast_track_days=18,
            individual_price=3380,
            bundle_price=2800,
            discount_percentage=17,
            eligibility_criteria=[
                "Investment amount > $1 million",
                "Manufacturing or production facility",
                "Compliant with environmental standards",
            ],
            recommended_for=[
                "Electronics manufacturing",
                "Textile and garment factories",
                "Pharmaceutical production",
                "Food processing units",
            ],
            popularity=5,
            used_by=342,
        ),
        StarterBundle(
            bundle_id="BUNDLE-002",
            name="Tech Startup Express",
            name_local="প্রযুক্তি স্টার্টআপ এক্সপ্রেস",
            description="Fast-track setup for software, IT services and digital businesses.",
            target_sectors=["ICT", "Services"],
            target_investment_size="small",
            services=_core_registrations() + [
                _service("SRV-021", "BTRC Registration", "BTRC", 5, 200, required=False),
            ],
            total_savings=250,
            total_days=20,
            fast_track_days=8,
            individual_price=1250,
            bundle_price=1000,
            discount_percentage=20,
            eligibility_criteria=[
                "ICT or software services",
                "No manufacturing/production",
                "Office-based operations",
            ],
            recommended_for=[
                "Software development companies",
                "IT consulting firms",
                "Digital agencies",
                "SaaS businesses",
            ],
            popularity=4,
            used_by=187,
        ),
        StarterBundle(
            bundle_id="BUNDLE-003",
            name="Export-Ready Package",
            name_local="রপ্তানি-প্রস্তুত প্যাকেজ",
            description="Registrations and trade certificates for export-oriented businesses.",
            target_sectors=["Textiles", "Manufacturing", "Agriculture"],
            target_investment_size="large",
            services=_core_registrations() + [
                _service("SRV-007", "Import Registration Certificate (IRC)", "CCI&E", 5, 350),
                _service("SRV-008", "Export Registration Certificate (ERC)", "CCI&E", 5, 350),
                _service("SRV-009", "Bond License (Duty-free imports)", "Customs", 10, 600,
                         required=False),
                _service("SRV-010", "ISO Certification Support", "Third Party", 30, 2500,
                         required=False),
            ],
            total_savings=820,
            total_days=65,
            fast_track_days=22,
            individual_price=5420,
            bundle_price=4600,
            discount_percentage=15,
            eligibility_criteria=[
                "Export-oriented business",
                "Investment amount > $5 million",
                "Compliance with international standards",
            ],
            recommended_for=[
                "Ready-made garment (RMG) factories",
                "Agricultural exporters",
                "Leather goods manufacturers",
                "Handicraft exporters",
            ],
            popularity=3,
            used_by=256,
        ),
    ]
