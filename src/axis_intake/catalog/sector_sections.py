"""Additional question sets appended when the applicant selects a sector."""

from __future__ import annotations

from axis_intake.catalog.descriptors import (
    Option,
    SectionSpec,
    checkboxes,
    choice,
    composite,
    text,
    when,
    when_yes,
    yes_no,
)

# ── Additional Questions: Artificial Intelligence ─────────────────────

AI_ADDITIONAL = SectionSpec(
    title="Additional Questions: Artificial Intelligence",
    number=14,
    answer_key="ai",
    sector="ai",
    questions=(
        yes_no(
            (
                "1. Is AI functionality integrated into any of your software products or "
                "services provided to customers or third parties?"
            ),
            "ai_functionality_integrated",
            when_yes(
                text(
                    "If yes, specify which products/services and describe the functionality:",
                    "ai_functionality_description",
                ),
            ),
        ),
        yes_no(
            "2. Do you develop your own proprietary AI or ML models?",
            "develop_proprietary_ai",
            when_yes(
                text(
                    "If yes, please describe the types of models and applications:",
                    "proprietary_ai_description",
                ),
            ),
        ),
        yes_no(
            "3. Do you use third-party or open-source AI/ML models in your offerings?",
            "use_third_party_ai",
            when_yes(
                text(
                    "If yes, please describe the types of models and applications:",
                    "third_party_ai_description",
                ),
            ),
        ),
        yes_no(
            (
                "4. Do you have formal processes to test, validate, and monitor the "
                "performance and reliability of AI/ML models before and after deployment?"
            ),
            "ai_testing_processes",
            when_yes(text("If yes, please describe:", "ai_testing_description")),
        ),
        yes_no(
            (
                "5. Do you have internal policies addressing the ethical or regulatory use of "
                "AI, including issues such as bias, fairness, explainability, or compliance "
                "with applicable AI legislation?"
            ),
            "ai_ethical_policies",
        ),
        yes_no(
            "6. Do you train AI/ML models on customer or third-party data?",
            "ai_train_customer_data",
            when_yes(
                text(
                    (
                        "If yes, do you have processes to obtain appropriate permissions, "
                        "anonymize, or secure the data?"
                    ),
                    "ai_data_permissions",
                ),
            ),
        ),
        yes_no(
            (
                "7. Have you taken steps to ensure that the use of data in training or "
                "operating your AI systems does not infringe third-party intellectual property "
                "rights?"
            ),
            "ai_ip_protection",
        ),
        yes_no(
            (
                "8. Do your customer contracts include disclaimers or limitations of liability "
                "specifically addressing your AI functionality (e.g., output reliability, "
                "errors, or recommendations generated by AI)?"
            ),
            "ai_contract_disclaimers",
        ),
        yes_no(
            (
                "9. Have you been subject to any complaints, demands, or legal proceedings "
                "arising out of your use or provision of AI systems?"
            ),
            "ai_legal_proceedings",
        ),
        yes_no(
            (
                "10. Are AI agents integrated into any of your software products or services "
                "provided to customers or third parties?"
            ),
            "ai_agents_integrated",
        ),
    ),
)

# ── Additional Questions: Decentralized Finance & Digital Assets ──────

DEFI_ADDITIONAL = SectionSpec(
    title="Additional Questions: Decentralized Finance & Digital Assets",
    number=15,
    answer_key="defi",
    sector="defi",
    questions=(
        yes_no(
            (
                "1. Do you provide any services involving cryptocurrency custody, wallet "
                "management, or private key management on behalf of clients?"
            ),
            "defi_custody_services",
            when_yes(
                text(
                    "If yes, please describe the controls in place to secure these assets:",
                    "defi_custody_controls",
                ),
            ),
        ),
        yes_no(
            "2. Do you operate or maintain a cryptocurrency exchange or trading platform?",
            "defi_exchange_platform",
            when_yes(
                composite(
                    "If yes, please specify:",
                    (
                        ("defi_crypto_types", "Crypto types"),
                        ("defi_daily_volume", "Daily volume"),
                        ("defi_geographic_regions", "Geographic regions"),
                    ),
                ),
            ),
        ),
        yes_no(
            (
                "3. Do you use or develop smart contracts in connection with your services "
                "(e.g., for decentralized finance, token issuance, automated settlements)?"
            ),
            "defi_smart_contracts",
            when_yes(
                text(
                    (
                        "If yes, please describe your processes for auditing and testing these "
                        "smart contracts prior to deployment:"
                    ),
                    "defi_audit_processes",
                ),
            ),
        ),
        yes_no(
            (
                "4. Have you engaged any third-party security firms to perform penetration "
                "testing or blockchain code audits on your platforms or products?"
            ),
            "defi_security_audits",
            when_yes(
                text(
                    "If yes, please attach the latest summary findings or certifications:",
                    "defi_security_findings",
                ),
            ),
        ),
        yes_no(
            (
                "5. Do your standard client agreements include disclaimers, waivers, or "
                "limitations of liability specifically addressing risks related to "
                "cryptocurrency transactions, volatility, or smart contracts?"
            ),
            "defi_disclaimers",
            when_yes(
                text("If yes, please attach sample contract clauses:", "defi_contract_clauses"),
            ),
        ),
        yes_no(
            (
                "6. Do you maintain separate hot and cold wallet infrastructures for "
                "cryptocurrency held on behalf of clients?"
            ),
            "defi_wallet_infrastructure",
            when_yes(
                text(
                    "If yes, please describe the split and security controls:",
                    "defi_wallet_split",
                ),
            ),
        ),
        yes_no(
            (
                "7. Are any of your blockchain or crypto-related activities regulated by "
                "financial services authorities (e.g., FINTRAC, MiCA, VARA, MAS)?"
            ),
            "defi_regulated",
            when_yes(text("If yes, please list regulators and licenses held:", "defi_regulators")),
        ),
        yes_no(
            (
                "8. Do you have documented policies and procedures in place for Anti-Money "
                "Laundering (AML), Counter Terrorist Financing (CFT), and customer onboarding "
                "(KYC/KYB)?"
            ),
            "defi_aml_policies",
            when_yes(text("Please attach your AML/KYC policy:", "defi_aml_policy")),
        ),
        text(
            (
                "9. What processes do you have to ensure compliance with international "
                "sanctions laws (e.g., OFAC, EU sanctions) in transactions involving digital "
                "assets?"
            ),
            "defi_sanctions_compliance",
        ),
        yes_no(
            (
                "10. Do you maintain logs or blockchain analytics to monitor and trace the "
                "source of funds to help mitigate fraud, money laundering, or sanctions "
                "violations?"
            ),
            "defi_blockchain_analytics",
            when_yes(
                text(
                    "If yes, please describe the systems or vendors used:",
                    "defi_analytics_systems",
                ),
            ),
        ),
        yes_no(
            (
                "11. Do you use any decentralized protocols (DEXs, liquidity pools, DeFi "
                "protocols) as part of your business operations or investment strategies?"
            ),
            "defi_protocols",
        ),
        yes_no(
            (
                "12. Do you use third-party custodians, liquidity providers, or technology "
                "vendors for any part of your crypto operations?"
            ),
            "defi_third_party",
            when_yes(
                text(
                    (
                        "If yes, do your contracts with these providers include indemnity and "
                        "hold harmless provisions in your favor?"
                    ),
                    "defi_indemnity",
                ),
            ),
        ),
        yes_no(
            (
                "13. Do you hold or have custody digital assets on your own balance sheet for "
                "investment purposes?"
            ),
            "defi_investment_assets",
            when_yes(
                text(
                    "Please indicate the approximate value and percentage of total assets:",
                    "defi_investment_value",
                ),
            ),
        ),
        yes_no(
            (
                "14. Do you develop, issue, or advise on the issuance of tokens, coins, or "
                "other digital assets?"
            ),
            "defi_token_issuance",
            when_yes(
                text(
                    "Please provide details on the token structure and investor protections:",
                    "defi_token_structure",
                ),
            ),
        ),
        text(
            (
                "15. What percentage of your business revenue is derived from blockchain or "
                "cryptocurrency-related services versus traditional financial or technology "
                "services?"
            ),
            "defi_revenue_percentage",
        ),
        yes_no(
            (
                "16. Do you have incident response plans specific to handling cryptocurrency "
                "or blockchain-related security events, including notifying customers and "
                "regulators?"
            ),
            "defi_incident_response",
        ),
        yes_no(
            (
                "17. Do you have insurance coverage in place (separate from E&O) to protect "
                "against loss or theft of cryptocurrency assets (crime / cyber crime / specie)?"
            ),
            "defi_crypto_insurance",
        ),
        yes_no(
            (
                "18. Do you carry directors & officers (D&O) insurance that specifically "
                "contemplates exposures arising from cryptocurrency or blockchain-related "
                "activities?"
            ),
            "defi_do_insurance",
        ),
        yes_no(
            (
                "19. Have you ever been the subject of any regulatory investigation, audit, "
                "inquiry, or received a warning letter in relation to your crypto or "
                "blockchain activities?"
            ),
            "defi_regulatory_issues",
        ),
        yes_no(
            (
                "20. Have you experienced any hacks, data breaches, theft of cryptocurrency "
                "assets, or significant transaction errors in the last five years?"
            ),
            "defi_security_incidents",
            when_yes(
                text(
                    "If yes, please provide details, including remedial actions taken:",
                    "defi_incident_details",
                ),
            ),
        ),
    ),
)

# ── Additional Questions: Autonomous Robotics ─────────────────────────

ROBOTICS_ADDITIONAL = SectionSpec(
    title="Additional Questions: Autonomous Robotics",
    number=16,
    answer_key="robotics",
    sector="robotics",
    questions=(
        text("1. What functions do your autonomous robots perform?", "robotics_functions"),
        yes_no(
            (
                "2. Are your robots used in public or semi-public environments (e.g., "
                "hospitals, airports, malls)?"
            ),
            "robotics_public_use",
        ),
        text(
            "3. How many autonomous robots are currently deployed in the field?",
            "robotics_deployed_count",
        ),
        choice(
            "4. What level of autonomy do your robots operate at?",
            "robotics_autonomy_level",
            (
                Option("remote_controlled", "Remote controlled"),
                Option("semi_autonomous", "Semi – autonomous"),
                Option("fully_autonomous", "Fully autonomous (no human in the loop)"),
            ),
        ),
        yes_no(
            "5. Can the robot make real-time decisions without human oversight?",
            "robotics_realtime_decisions",
        ),
        yes_no(
            "6. Are there human override or emergency shutdown capabilities built into each unit?",
            "robotics_emergency_shutdown",
        ),
        checkboxes(
            "7. What navigation methods are used? (select all that apply)",
            "robotics_navigation",
            (
                ("gps", "GPS"),
                ("slam", "SLAM"),
                ("lidar", "LiDAR"),
                ("computer_vision", "Computer Vision"),
                ("beacon_infrared", "Beacon/Infrared"),
                ("other", "Other"),
            ),
            follow_up=when(
                "other",
                then=[text("Please specify other navigation methods:", "nav_other_specify")],
            ),
        ),
        yes_no(
            (
                "8. Are the robots equipped with real-time obstacle detection and collision "
                "avoidance systems?"
            ),
            "robotics_obstacle_detection",
        ),
        yes_no(
            (
                "9. Have you had any reported incidents involving physical harm or property "
                "damage caused by a robot?"
            ),
            "robotics_incidents",
            when_yes(text("If yes please describe:", "robotics_incident_description")),
        ),
        yes_no(
            (
                "10. Do your robots use AI agents or machine learning models to support "
                "decision-making?"
            ),
            "robotics_ai_ml",
        ),
        text(
            "11. How often is the software or firmware on the robots updated?",
            "robotics_update_frequency",
        ),
        yes_no(
            (
                "12. Do you maintain logs of robot activity and decision-making for audit or "
                "incident response purposes?"
            ),
            "robotics_activity_logs",
        ),
        yes_no(
            "13. Are communications between robots and your servers encrypted and authenticated?",
            "robotics_encrypted_comms",
        ),
        yes_no(
            (
                "14. Have your systems undergone independent safety, cybersecurity, or "
                "compliance audits?"
            ),
            "robotics_audits",
        ),
        yes_no(
            (
                "15. Are your robots certified or compliant with any relevant safety or "
                "robotics standards (e.g., ISO 13482, UL 3100)?"
            ),
            "robotics_standards",
        ),
        choice(
            "16. Do you perform regular maintenance or diagnostics on deployed robotic units?",
            "robotics_maintenance",
            (
                Option("scheduled_protocols", "Yes – per scheduled maintenance protocols"),
                Option("failure_only", "Yes – only upon failure or customer report"),
                Option("no_formal", "No formal maintenance program"),
            ),
        ),
        choice(
            (
                "17. Are any robots deployed at customer or third-party locations where you do "
                "not have direct operational control?"
            ),
            "robotics_third_party_deployment",
            (
                Option("no", "No"),
                Option("yes_monitored", "Yes – with active monitoring"),
                Option("yes_unmonitored", "Yes – without active monitoring"),
            ),
        ),
        choice(
            (
                "18. Do your robots interact directly with members of the public or end users "
                "(e.g., customers, patients, pedestrians)?"
            ),
            "robotics_public_interaction",
            (
                Option("yes_frequently", "Yes – frequently"),
                Option("occasionally", "Occasionally"),
                Option("no_direct", "No direct interaction"),
            ),
        ),
        checkboxes(
            "19. Do you have contracts in place with customers or partners that include:",
            "robotics_contract_terms",
            (
                ("limitations_liability", "Limitations of liability?"),
                ("indemnification", "Indemnification terms?"),
                ("insurance_requirements", "Insurance requirements?"),
            ),
        ),
        choice(
            (
                "20. Do you carry insurance coverage specific to autonomous hardware/software "
                "risks (e.g., product liability, tech E&O, cyber)?"
            ),
            "robotics_insurance_coverage",
            (
                Option("yes_adequate", "Yes – adequate and reviewed annually"),
                Option("yes_needs_review", "Yes – but may need review"),
                Option("no_coverage", "No specific coverage"),
            ),
        ),
    ),
)

SECTOR_SECTIONS: tuple[SectionSpec, ...] = (AI_ADDITIONAL, DEFI_ADDITIONAL, ROBOTICS_ADDITIONAL)
