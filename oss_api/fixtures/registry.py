"""
Blockchain license records and the deal-room documents seeded for the demo
investor.

Timestamps are expressed relative to the reference date so "issued two days
ago" stays true for the fixture universe.
"""

from datetime import date, datetime, time, timedelta, timezone

from oss_api.models.domain import AccessLogEntry, BlockchainRecord, DealDocument

CONTRACT_ADDRESS = "0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb"


def _days_before(reference_date: date, days: int) -> datetime:
    anchor = datetime.combine(reference_date, time(9, 0), tzinfo=timezone.utc)
    return anchor - timedelta(days=days)


def build_blockchain_records(reference_date: date) -> list[BlockchainRecord]:
    return [
        BlockchainRecord(
            tx_hash="0x7f9c8e3b2a5d6f1e4c9b8a7d6e5f4c3b2a1d9e8f7c6b5a4d3e2f1a9b8c7d6e5f",
            block_number=18456789,
            timestamp=_days_before(reference_date, 2),
            document_type="Business License",
            document_id="RJSC-2024-BD-00145",
            issuer="Registrar of Joint Stock Companies & Firms",
            holder="TechCorp Bangladesh Ltd.",
            status="verified",
            verification_level="gold",
            merkle_root="0x4a5b6c7d8e9f0a1b2c3d4e5f6a7b8c9d0e1f2a3b4c5d6e7f8a9b0c1d2e3f4a5b",
            ipfs_hash="QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG",
            smart_contract_address=CONTRACT_ADDRESS,
            gas_used=142567,
            confirmations=1245,
            metadata={
                "document_name": "Certificate of Incorporation",
                "issue_date": "2024-01-15",
                "jurisdiction": "Dhaka, Bangladesh",
                "regulatory_body": "RJSC",
            },
        ),
        BlockchainRecord(
            tx_hash="0x3e4d5c6b7a8d9e0f1a2b3c4d5e6f7a8b9c0d1e2f3a4b5c6d7e8f9a0b1c2d3e4f",
            block_number=18467234,
            timestamp=_days_before(reference_date, 5),
            document_type="Environmental Clearance",
            document_id="DOE-EC-2024-0892",
            issuer="Department of Environment",
            holder="TechCorp Bangladesh Ltd.",
            status="verified",
            verification_level="gold",
            merkle_root="0x9f8e7d6c5b4a3d2e1f0a9b8c7d6e5f4a3b2c1d0e9f8a7b6c5d4e3f2a1b0c9d8e",
            ipfs_hash="QmXyZ123ABCdefGHI456JKLmno789PQRstu012VWXyz345",
            smart_contract_address=CONTRACT_ADDRESS,
            gas_used=98432,
            confirmations=987,
            metadata={
                "document_name": "Environmental Clearance Certificate",
                "issue_date": "2024-01-28",
                "expiry_date": "2029-01-28",
                "jurisdiction": "National",
                "regulatory_body": "DoE",
            },
        ),
        BlockchainRecord(
            tx_hash="0x8d7c6b5a4e3d2f1e0a9b8c7d6e5f4a3b2c1d0e9f8a7b6c5d4e3f2a1b0c9d8e7f",
            block_number=18478901,
            timestamp=_days_before(reference_date, 10),
            document_type="Tax Clearance",
            document_id="NBR-TCC-2024-3456",
            issuer="National Board of Revenue",
            holder="TechCorp Bangladesh Ltd.",
            status="verified",
            verification_level="silver",
            merkle_root="0x1a2b3c4d5e6f7a8b9c0d1e2f3a4b5c6d7e8f9a0b1c2d3e4f5a6b7c8d9e0f1a2b",
            ipfs_hash="QmABC789DEFghi123JKLmno456PQRstu789VWXyz012345",
            smart_contract_address=CONTRACT_ADDRESS,
            gas_used=76543,
            confirmations=654,
            metadata={
                "document_name": "Tax Clearance Certificate",
                "issue_date": "2024-02-01",
                "expiry_date": "2025-02-01",
                "jurisdiction": "National",
                "regulatory_body": "NBR",
            },
        ),
        BlockchainRecord(
            tx_hash="0x5f4e3d2c1b0a9e8d7c6b5a4d3e2f1a0b9c8d7e6f5a4b3c2d1e0f9a8b7c6d5e4f",
            block_number=18489456,
            timestamp=_days_before(reference_date, 15),
            document_type="Import License",
            document_id="CCI&E-IL-2024-7890",
            issuer="Chief Controller of Imports & Exports",
            holder="TechCorp Bangladesh Ltd.",
            status="verified",
            verification_level="gold",
            merkle_root="0x6c7d8e9f0a1b2c3d4e5f6a7b8c9d0e1f2a3b4c5d6e7f8a9b0c1d2e3f4a5b6c7d",
            ipfs_hash="QmDEF456GHIjkl789MNOpqr012STUvwx345YZabc678901",
            smart_contract_address=CONTRACT_ADDRESS,
            gas_used=112345,
            confirmations=432,
            metadata={
                "document_name": "Import Registration Certificate",
                "issue_date": "2024-02-10",
                "expiry_date": "2025-02-10",
                "jurisdiction": "National",
                "regulatory_body": "CCI&E",
            },
        ),
    ]


def build_documents(reference_date: date) -> list[DealDocument]:
    return [
        DealDocument(
            id="DOC-001",
            investor_id="INV-001",
            name="Feasibility Study - Gazipur Plant.pdf",
            type="feasibility_study",
            uploaded_at=_days_before(reference_date, 6),
            size="4.2 MB",
            confidential=True,
            watermark=True,
            shared_with=["OFF-001"],
            access_log=[
                AccessLogEntry("OFF-001", "Ahmed Khan", "viewed", _days_before(reference_date, 5)),
            ],
        ),
        DealDocument(
            id="DOC-002",
            investor_id="INV-001",
            name="Board Resolution.pdf",
            type="board_resolution",
            uploaded_at=_days_before(reference_date, 3),
            size="310 KB",
        ),
    ]
