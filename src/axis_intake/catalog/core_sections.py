"""Sections 1-13: the questions every application carries.

Question wording, numbering and stored field names are part of the
submitted form's contract and must not be edited casually.
"""

from __future__ import annotations

from axis_intake.catalog.descriptors import (
    ChoiceLabel,
    Column,
    FieldValue,
    GatedValue,
    Option,
    SectionSpec,
    Static,
    TableSpec,
    checkboxes,
    choice,
    composite,
    labelled,
    number,
    scale,
    statements,
    table,
    text,
    when,
    when_any,
    when_yes,
    yes_no,
)

# ── 1. Sectors ──────────────────────────────────────────────────────

SECTORS = SectionSpec(
    title="1. Sectors",
    number=1,
    answer_key="sectors",
    questions=(
        checkboxes(
            "Does your business provide products or services within any of the following sectors?",
            "sectors",
            (
                ("ai", "Artificial Intelligence"),
                ("defi", "Decentralized Finance & Digital Assets"),
                ("robotics", "Autonomous Robotics"),
            ),
        ),
    ),
)

# ── 2. General Information ────────────────────────────────────────────

GENERAL_INFORMATION = SectionSpec(
    title="2. General Information",
    number=2,
    answer_key="generalInfo",
    questions=(
        text("1. Legal Name of Organization", "legal_name"),
        text("Location of Incorporation", "incorporation_location"),
        text("2. Mailing Address", "mailing_address"),
        text("3. List all subsidiaries & Location of Incorporation", "subsidiaries"),
        text("4. List all Physical Locations", "physical_locations"),
        text("5. List all URLs", "urls"),
        number("6. Year Company Established", "year_established"),
        number("7. Number of Employees", "num_employees"),
        yes_no(
            "8. Are any Employees based outside of Canada?",
            "employees_outside_canada",
            when_yes(
                text(
                    "If yes, list the country and the number of employees in each:",
                    "employees_outside_list",
                ),
            ),
        ),
        composite(
            "9. Breach Response Contact",
            (
                ("breach_contact_name", "Name"),
                ("breach_contact_title", "Title"),
                ("breach_contact_email", "Email"),
                ("breach_contact_phone", "Phone"),
            ),
        ),
        yes_no(
            "10. Any recent or planned mergers, acquisitions, or divestitures?",
            "mergers_acquisitions",
            when_yes(text("Please provide details:", "mergers_description")),
        ),
        yes_no(
            (
                "11. Is your organization regulated by any governing body or required to "
                "comply with specific legislation, standards, or licensing requirements?"
            ),
            "organization_regulated",
            when_yes(
                text(
                    "If yes, please specify the authority and relevant legislation:",
                    "regulated_description",
                ),
            ),
        ),
        yes_no(
            (
                "12. Does your organization hold any recognized certifications (e.g., ISO "
                "27001, SOC 2, PCI DSS, or equivalent)?"
            ),
            "organization_certifications",
            when_yes(text("If yes, please specify:", "certifications_description")),
        ),
        yes_no(
            (
                "13. Does your organization undergo any independent audits, assessments, or "
                "third-party evaluations of its internal controls or risk management practices?"
            ),
            "organization_audits",
            when_yes(
                text(
                    "If yes, please specify the scope, frequency, and auditing party:",
                    "audits_description",
                ),
            ),
        ),
    ),
)

# ── 3. Operations ─────────────────────────────────────────────────────

OPERATIONS = SectionSpec(
    title="3. Operations",
    number=3,
    answer_key="operations",
    questions=(
        text(
            "1. Briefly describe the services and/or technology products your company provides",
            "services_description",
        ),
        table(
            "2. Percentage of revenue derived from each activity",
            TableSpec(
                columns=(Column("Activity", 0.6), Column("Percentage", 0.4, "right")),
                rows=(
                    (
                        Static("Custom Software Development"),
                        FieldValue("revenue_software", default="0", suffix="%"),
                    ),
                    (
                        Static("Software as a Service"),
                        FieldValue("revenue_saas", default="0", suffix="%"),
                    ),
                    (
                        Static("Consulting Services"),
                        FieldValue("revenue_consulting", default="0", suffix="%"),
                    ),
                    (Static("Hardware"), FieldValue("revenue_hardware", default="0", suffix="%")),
                    (Static("Other"), FieldValue("revenue_other", default="0", suffix="%")),
                ),
            ),
        ),
        table(
            "3. Do you operate in any of the following areas?",
            TableSpec(
                columns=(Column("Area", 0.35), Column("Yes/No", 0.15, "center"), Column("Details", 0.5)),
                rows=(
                    (
                        Static("Critical Infrastructure"),
                        ChoiceLabel("risk_critical_infrastructure"),
                        GatedValue(
                            "critical_infrastructure_details",
                            "risk_critical_infrastructure",
                        ),
                    ),
                    (
                        Static("Financial Services"),
                        ChoiceLabel("risk_financial_services"),
                        GatedValue("financial_services_details", "risk_financial_services"),
                    ),
                    (
                        Static("Healthcare"),
                        ChoiceLabel("risk_healthcare"),
                        GatedValue("healthcare_details", "risk_healthcare"),
                    ),
                    (
                        Static("Government/Defense"),
                        ChoiceLabel("risk_government"),
                        GatedValue("government_details", "risk_government"),
                    ),
                    (
                        Static("Aerospace"),
                        ChoiceLabel("risk_aerospace"),
                        GatedValue("aerospace_details", "risk_aerospace"),
                    ),
                    (
                        Static("Rail"),
                        ChoiceLabel("risk_rail"),
                        GatedValue("rail_details", "risk_rail"),
                    ),
                    (
                        Static("Mining/Oil & Gas"),
                        ChoiceLabel("risk_mining_oil_gas"),
                        GatedValue("mining_oil_gas_details", "risk_mining_oil_gas"),
                    ),
                    (
                        Static("Energy"),
                        ChoiceLabel("risk_energy"),
                        GatedValue("energy_details", "risk_energy"),
                    ),
                    (
                        Static("Adult Entertainment/Gambling"),
                        ChoiceLabel("risk_adult_entertainment"),
                        GatedValue("adult_entertainment_details", "risk_adult_entertainment"),
                    ),
                    (
                        Static("Semi-Conductors"),
                        ChoiceLabel("risk_semiconductors"),
                        GatedValue("semiconductors_details", "risk_semiconductors"),
                    ),
                    (
                        Static("Architecture/Engineering"),
                        ChoiceLabel("risk_architecture_engineering"),
                        GatedValue(
                            "architecture_engineering_details",
                            "risk_architecture_engineering",
                        ),
                    ),
                ),
            ),
        ),
        yes_no(
            "4. Do you sell tangible products?",
            "sell_tangible_products",
            when_yes(
                labelled("Product description", "tangible_products_description"),
                labelled("% Revenue", "tangible_products_revenue"),
            ),
        ),
        yes_no(
            "5. Do you (or your subcontractors) install hardware at client sites?",
            "install_hardware",
            when_yes(labelled("% revenue", "hardware_installation_revenue")),
        ),
        yes_no(
            "6. Do you provide hosting services to third parties?",
            "hosting_services",
            when_yes(
                choice(
                    "If yes, do you use:",
                    "hosting_infrastructure",
                    (Option("own", "Own Infrastructure"), Option("third_party", "Third Party")),
                    follow_up=when(
                        "third_party",
                        then=[
                            composite(
                                "",
                                (
                                    ("third_party_name", "Provider name"),
                                    ("third_party_tier", "Tier rating"),
                                ),
                            ),
                        ],
                    ),
                ),
            ),
        ),
        yes_no(
            (
                "7. Do you use artificial intelligence (AI) or machine learning (ML) tools in "
                "your business operations?"
            ),
            "ai_ml_usage",
            when_yes(labelled("Details", "ai_ml_description")),
        ),
        yes_no(
            "8. Do you provide any managed IT services?",
            "managed_it_services",
            when_yes(labelled("% revenue", "managed_it_revenue")),
        ),
        number("9. Approximately how many customers do you have?", "customer_count"),
        table(
            "10. List the top 3 clients over the past 3 years",
            TableSpec(
                columns=(
                    Column("#", 0.1, "center"),
                    Column("Client Name", 0.28),
                    Column("Service Provided", 0.28),
                    Column("Duration", 0.17),
                    Column("Value ($)", 0.17, "right"),
                ),
                rows=(
                    (
                        Static("1"),
                        FieldValue("client_1_name", max_chars=25),
                        FieldValue("client_1_service", max_chars=25),
                        FieldValue("client_1_duration"),
                        FieldValue("client_1_value", default="0", prefix="$"),
                    ),
                    (
                        Static("2"),
                        FieldValue("client_2_name", max_chars=25),
                        FieldValue("client_2_service", max_chars=25),
                        FieldValue("client_2_duration"),
                        FieldValue("client_2_value", default="0", prefix="$"),
                    ),
                    (
                        Static("3"),
                        FieldValue("client_3_name", max_chars=25),
                        FieldValue("client_3_service", max_chars=25),
                        FieldValue("client_3_duration"),
                        FieldValue("client_3_value", default="0", prefix="$"),
                    ),
                ),
            ),
        ),
    ),
)

# ── 4. Financials ─────────────────────────────────────────────────────

FINANCIALS = SectionSpec(
    title="4. Financials",
    number=4,
    answer_key="financials",
    questions=(
        text("1. Date of financial year end", "financial_year_end"),
        table(
            "2. Provide gross revenues for:",
            TableSpec(
                columns=(
                    Column("Period", 0.4),
                    Column("Canada ($)", 0.2, "right"),
                    Column("USA ($)", 0.2, "right"),
                    Column("Foreign ($)", 0.2, "right"),
                ),
                rows=(
                    (
                        Static("Last completed fiscal year end"),
                        FieldValue("revenue_last_domestic", default="0", prefix="$"),
                        FieldValue("revenue_last_usa", default="0", prefix="$"),
                        FieldValue("revenue_last_foreign", default="0", prefix="$"),
                    ),
                    (
                        Static("Estimate for current fiscal year end"),
                        FieldValue("revenue_current_domestic", default="0", prefix="$"),
                        FieldValue("revenue_current_usa", default="0", prefix="$"),
                        FieldValue("revenue_current_foreign", default="0", prefix="$"),
                    ),
                    (
                        Static("Estimate for next completed fiscal year end"),
                        FieldValue("revenue_next_domestic", default="0", prefix="$"),
                        FieldValue("revenue_next_usa", default="0", prefix="$"),
                        FieldValue("revenue_next_foreign", default="0", prefix="$"),
                    ),
                ),
            ),
        ),
        number(
            "3. Percentage of sales business to business",
            "sales_b2b_percentage",
            unit="percent",
        ),
        number(
            "4. Percentage of sales business to consumer",
            "sales_b2c_percentage",
            unit="percent",
        ),
        number("5. Average contract value", "average_contract_value", unit="currency"),
        yes_no(
            "6. Do any single clients represent more than 5% of your total annual revenue?",
            "single_client_5_percent",
            when_yes(labelled("Details", "client_5_percent_description")),
        ),
        table(
            "7. List your largest 3 Projects or Contracts in the past 2 years",
            TableSpec(
                columns=(
                    Column("#", 0.1, "center"),
                    Column("Project/Contract Name", 0.3),
                    Column("Client", 0.25),
                    Column("Value ($)", 0.175, "right"),
                    Column("Duration", 0.175),
                ),
                rows=(
                    (
                        Static("1"),
                        FieldValue("project_1_name", max_chars=30),
                        FieldValue("project_1_client", max_chars=25),
                        FieldValue("project_1_value", default="0", prefix="$"),
                        FieldValue("project_1_duration"),
                    ),
                    (
                        Static("2"),
                        FieldValue("project_2_name", max_chars=30),
                        FieldValue("project_2_client", max_chars=25),
                        FieldValue("project_2_value", default="0", prefix="$"),
                        FieldValue("project_2_duration"),
                    ),
                    (
                        Static("3"),
                        FieldValue("project_3_name", max_chars=30),
                        FieldValue("project_3_client", max_chars=25),
                        FieldValue("project_3_value", default="0", prefix="$"),
                        FieldValue("project_3_duration"),
                    ),
                ),
            ),
        ),
        number("8. Total payroll", "total_payroll", unit="currency"),
    ),
)

# ── 5. Contractual Controls ───────────────────────────────────────────

CONTRACTUAL_CONTROLS = SectionSpec(
    title="5. Contractual Controls",
    number=5,
    answer_key="contractualControls",
    questions=(
        yes_no(
            "1. Do you require all employees to sign a confidentiality agreement?",
            "employee_confidentiality",
        ),
        yes_no(
            (
                "2. Are employees required to agree not to solicit customers when they leave "
                "your organization?"
            ),
            "employee_non_solicitation",
        ),
        yes_no(
            (
                "3. Do you require third parties with whom you exchange confidential "
                "information to sign a confidentiality agreement?"
            ),
            "third_party_confidentiality",
        ),
        yes_no(
            (
                "4. Do you require third parties that process personal information on your "
                "behalf to sign a data processing agreement?"
            ),
            "data_processing_agreement",
        ),
        text(
            (
                "5. Do you review third party contracts to ensure they include appropriate "
                "security standards for your relationship?"
            ),
            "contract_security_review",
        ),
        text(
            (
                "6. Do you require cyber insurance or security standards in contracts with key "
                "partners or suppliers?"
            ),
            "partner_security_requirements",
        ),
    ),
)

# ── 6. Cybersecurity, Technical & Crime Controls ──────────────────────

CYBERSECURITY = SectionSpec(
    title="6. Cybersecurity, Technical & Crime Controls",
    number=6,
    answer_key="cybersecurity",
    questions=(
        statements(
            "1. Who is responsible for overseeing cybersecurity on a day-to-day basis?",
            "cybersecurity_responsibility",
            (
                "No one is formally responsible for cybersecurity.",
                (
                    "Cybersecurity responsibilities are informally assigned, usually handled "
                    "part-time by IT, operations, or a designated staff member."
                ),
                (
                    "A full-time staff member or external provider is responsible, with "
                    "defined oversight."
                ),
                (
                    "A qualified internal or external CISO manages cybersecurity with clear "
                    "authority, reporting, and board-level oversight."
                ),
            ),
        ),
        statements(
            "2. Is there a formal cybersecurity policy in place for employees to follow?",
            "cybersecurity_policy",
            (
                "No cybersecurity policy exists.",
                (
                    "A policy exists and is shared with employees during onboarding but it may "
                    "be outdated or not consistently distributed to all staff beyond initial "
                    "hiring."
                ),
                "The policy is current, distributed to all employees, and acknowledged in writing.",
                (
                    "A comprehensive, regularly updated policy is enforced and supported with "
                    "training and accountability mechanisms."
                ),
            ),
        ),
        statements(
            (
                "3. Do all team members receive regular training to help them recognize cyber "
                "threats and scams?"
            ),
            "cyber_training",
            (
                "No cybersecurity training is provided.",
                (
                    "Most employees receive annual training, but it may be informal, one-time, "
                    "or not consistently tracked."
                ),
                "All employees receive mandatory cybersecurity training annually.",
                (
                    "Training is ongoing, tailored by role, and includes phishing simulations "
                    "and tracking of completion and performance."
                ),
            ),
        ),
        statements(
            (
                "4. Is multi-factor authentication (MFA) required for accessing company "
                "systems, email, and cloud tools remotely?"
            ),
            "mfa_requirement",
            (
                "MFA is not used.",
                (
                    "MFA is required for remote access to critical systems and used for some "
                    "other users or systems, but overall implementation is inconsistent."
                ),
                "MFA is enforced for all users across remote and cloud environments.",
                (
                    "MFA is universally enforced, regularly tested, and monitored for "
                    "compliance and anomalies."
                ),
            ),
        ),
        statements(
            (
                "5. Is remote access to your internal or cloud systems restricted to secure "
                "methods like VPN or SSO and protected with MFA?"
            ),
            "remote_access_security",
            (
                "Remote access is open or unmanaged.",
                (
                    "Remote access typically relies on passwords and may use VPN or SSO, but "
                    "secure controls like MFA are not consistently applied."
                ),
                "Secure access (VPN or SSO) with MFA is required for all remote users.",
                (
                    "Remote access is tightly controlled with policy enforcement, MFA, and "
                    "centralized access logging."
                ),
            ),
        ),
        statements(
            "6. What tools or protections secure employee devices and email from cyber threats?",
            "device_protection",
            (
                "Devices and email are not protected by security tools.",
                "Basic antivirus, standard endpoint protection, and email filtering are in place.",
                (
                    "Devices are protected by centrally managed EDR, and email systems have "
                    "advanced filtering and threat detection."
                ),
                (
                    "A layered security stack is deployed across all devices and email "
                    "accounts, including EDR, DLP, and sandboxing."
                ),
            ),
        ),
        statements(
            (
                "7. How is user access managed, including setting, adjusting, and promptly "
                "removing access?"
            ),
            "user_access_management",
            (
                "Access is granted manually and rarely updated.",
                (
                    "Access rights are adjusted as needed and reviewed occasionally, with "
                    "revocation upon termination, though delays may occur."
                ),
                "Role-based access controls are in place with regular access reviews.",
                (
                    "Access is centrally managed, provisioned by role, reviewed quarterly, and "
                    "automatically revoked upon role change or termination."
                ),
            ),
        ),
        statements(
            "8. Do you collect and review activity logs across your IT environment?",
            "activity_logs",
            (
                "No activity logs are collected or retained.",
                (
                    "Logs are collected from key systems but are not actively monitored, and "
                    "reviews are performed reactively."
                ),
                "Centralized log management is in place with routine review and alerting.",
                (
                    "Logs are collected, analyzed with SIEM tools, and reviewed proactively "
                    "with incident response integration."
                ),
            ),
        ),
        statements(
            (
                "9. Do you use tools or services to identify cyber threats or unusual system "
                "activity in real time?"
            ),
            "threat_detection",
            (
                "No tools are used to monitor system activity or threats.",
                (
                    "Basic alerts come from standard antivirus or firewall tools, with some "
                    "real-time monitoring in place, though it is not centrally managed."
                ),
                (
                    "Real-time threat detection tools are used and monitored by internal or "
                    "external IT/security teams."
                ),
                (
                    "A fully integrated threat detection and response system (e.g., MDR, SIEM) "
                    "monitors activity 24/7 with alerting and escalation."
                ),
            ),
        ),
        statements(
            (
                "10. How does your organization manage aging technology and ensure software "
                "and systems stay updated and supported?"
            ),
            "technology_management",
            (
                "Software updates and patching are done irregularly or not at all.",
                (
                    "Most systems are updated periodically, though some legacy systems remain "
                    "unsupported, and updates often occur reactively without a set schedule."
                ),
                (
                    "Key systems are tracked, security patches are regularly applied, and "
                    "major upgrades are planned every few years, though some older systems "
                    "remain in use if still functional."
                ),
                (
                    "Systems are proactively monitored for EOL/EOS, with automated patching "
                    "and lifecycle management to maintain secure, supported software."
                ),
            ),
        ),
        text(
            (
                "11. Are firewalls in place to protect the network perimeter and to segment "
                "internal networks?"
            ),
            "firewall_protection",
        ),
        yes_no(
            (
                "12. Are internal/external vulnerability scans or penetration tests of your "
                "network performed?"
            ),
            "vulnerability_scans",
            when_yes(text("If yes, frequency and methods:", "vulnerability_frequency_methods")),
        ),
        text(
            "13. Do you restrict user access/permissions to a need-to-know basis?",
            "user_access_restrictions",
        ),
        text(
            "14. Are unused/unneeded network services and ports disabled or closed promptly?",
            "unused_services",
        ),
        composite(
            "15. Name your service provider for each function:",
            (
                ("datacenter_provider", "Data center/cloud hosting"),
                ("managed_security_provider", "Managed security service"),
                ("security_monitoring_provider", "Security event/alert monitoring"),
                ("managed_it_provider", "Managed IT service provider"),
            ),
        ),
        text(
            (
                "16. Do you have a formal procedure for departing employees that includes "
                "revoking access to systems and recovery of all company devices/credentials?"
            ),
            "departing_employee_procedure",
        ),
        statements(
            (
                "17. Do you require more than one person to approve high-risk financial "
                "transactions like wire transfers?"
            ),
            "dual_approval_financial",
            (
                (
                    "No approval process is required; a single individual can execute "
                    "high-risk transactions."
                ),
                (
                    "Dual approval is expected for some transactions and occasionally "
                    "required, but it is not consistently applied, enforced, or documented."
                ),
                (
                    "A dual-approval policy is enforced for all high-risk transactions (e.g., "
                    "wire transfers, bank account changes), with audit trail documentation."
                ),
                (
                    "Dual authorization is mandatory for all high-risk transactions, embedded "
                    "in financial systems, with tiered thresholds, role-based permissions, "
                    "fraud alerts, and periodic audits to verify compliance."
                ),
            ),
        ),
        choice(
            (
                "18. What controls are in place to prevent and detect financial fraud, "
                "including scams targeting incoming and outgoing wire transfers or internal "
                "theft?"
            ),
            "financial_fraud_controls",
            (
                Option(
                    (
                        " No formal controls or monitoring systems are in place; the company "
                        "relies on trust or informal checks."
                    ),
                    (
                        "No formal controls or monitoring systems are in place; the company "
                        "relies on trust or informal checks."
                    ),
                ),
                Option(
                    (
                        "Basic safeguards exist, such as accounting software permissions and "
                        "finance team reviews, with some vendor verification and fraud "
                        "awareness efforts, but proactive measures against risks like "
                        "phishing, business email compromise, or internal theft are limited, "
                        "and monitoring is minimal."
                    ),
                    (
                        "Basic safeguards exist, such as accounting software permissions and "
                        "finance team reviews, with some vendor verification and fraud "
                        "awareness efforts, but proactive measures against risks like "
                        "phishing, business email compromise, or internal theft are limited, "
                        "and monitoring is minimal."
                    ),
                ),
                Option(
                    (
                        "Documented fraud prevention policies exist, with training, vendor "
                        "validation, audit logs, and periodic financial audits or "
                        "reconciliations."
                    ),
                    (
                        "Documented fraud prevention policies exist, with training, vendor "
                        "validation, audit logs, and periodic financial audits or "
                        "reconciliations."
                    ),
                ),
                Option(
                    (
                        "A formal fraud prevention framework is in place, including dual "
                        "controls, transaction monitoring, fraud detection tools, employee "
                        "training, whistleblower protections, and regular testing or audits of "
                        "financial systems."
                    ),
                    (
                        "A formal fraud prevention framework is in place, including dual "
                        "controls, transaction monitoring, fraud detection tools, employee "
                        "training, whistleblower protections, and regular testing or audits of "
                        "financial systems."
                    ),
                ),
            ),
        ),
    ),
)

# ── 7. Data Backup & Business Continuity & Supply Chain Controls ──────

DATA_BACKUP = SectionSpec(
    title="7. Data Backup & Business Continuity & Supply Chain Controls",
    number=7,
    answer_key="dataBackup",
    questions=(
        scale(
            (
                "1. What processes are in place to quickly detect and respond to data breaches "
                "or unauthorized access?"
            ),
            "breach_detection_response",
            (
                "No formal detection or response process exists.",
                (
                    "Incidents are handled reactively when staff notice something suspicious, "
                    "supported by basic detection tools like antivirus and system logs, but "
                    "incident response is largely ad hoc."
                ),
                (
                    "A defined incident response plan exists, with detection tools, trained "
                    "responders, and escalation protocols."
                ),
                (
                    "A comprehensive incident response program includes 24/7 monitoring, "
                    "real-time alerting, runbooks, tabletop testing, and post-incident review."
                ),
            ),
        ),
        scale(
            (
                "2. Do you have a communications plan to protect your company's reputation in "
                "the event of a major issue or breach?"
            ),
            "communications_plan",
            (
                "No communications plan exists for handling incidents.",
                (
                    "Incident responses are generally handled by PR or leadership, supported "
                    "by a basic communications plan with draft statements and designated "
                    "spokespersons, but there is no formal protocol."
                ),
                (
                    "A formal reputational risk communications plan is documented, with media, "
                    "legal, and customer messaging protocols."
                ),
                (
                    "The company maintains a comprehensive communications playbook for crisis "
                    "events, including breach notification, regulatory guidance, and "
                    "stakeholder outreach, tested regularly through simulations."
                ),
            ),
        ),
        scale(
            "3. Do you have backup systems to recover data after a cyber incident or outage?",
            "backup_systems",
            (
                "No backup systems exist.",
                (
                    "Regular backups are taken and stored offsite or in the cloud, but not all "
                    "data is covered, testing is limited, and updates may not be consistent."
                ),
                "Backups are automated, encrypted, and tested periodically for critical systems.",
                (
                    "An enterprise-grade backup and recovery system is in place with real-time "
                    "replication, frequent testing, and integration into the overall incident "
                    "response strategy."
                ),
            ),
        ),
        scale(
            (
                "4. If systems go down, how quickly can you get your critical data and "
                "operations back online?"
            ),
            "recovery_time",
            (
                "There is no defined recovery timeframe; recovery would be improvised.",
                (
                    "A target recovery window is defined for key systems (e.g., 48–72 hours), "
                    "but for other areas recovery could take several days, and there are no "
                    "documented targets."
                ),
                (
                    "Recovery goals (RTOs) are set by system tier, with most critical services "
                    "recoverable within 24 hours."
                ),
                (
                    "Rapid recovery (RTO < 4 hours for critical systems) is enabled via "
                    "automated failover, and performance against RTOs is tested and validated."
                ),
            ),
        ),
        scale(
            (
                "5. Do you maintain business continuity and disaster recovery plans, and what "
                "are your key recovery goals?"
            ),
            "continuity_recovery_plans",
            (
                "No formal plans exist.",
                (
                    "Recovery plans exist with defined Recovery Time Objectives and Recovery "
                    "Point Objectives and some written procedures, but they are not thoroughly "
                    "tested or fully aligned to recovery goals."
                ),
                (
                    "BCP and DRP are documented, with role assignments, key systems "
                    "prioritized, and regular stakeholder reviews."
                ),
                (
                    "Continuity and disaster recovery plans are fully developed, tested "
                    "regularly, and aligned to business impact analyses with clearly defined "
                    "and measured RTOs/RPOs."
                ),
            ),
        ),
        scale(
            "6. How often are recovery plans tested, and what improvements have resulted?",
            "recovery_testing",
            (
                "Recovery plans are never tested.",
                (
                    "Recovery plans are reviewed occasionally and tested annually, with some "
                    "lessons learned incorporated, but exercises are not frequent or "
                    "comprehensive."
                ),
                (
                    "Tests are conducted at least twice per year, with results documented and "
                    "improvements tracked."
                ),
                (
                    "Plans are tested regularly using realistic scenarios (e.g., tabletop and "
                    "live failover), with continuous improvement cycles and executive "
                    "oversight."
                ),
            ),
        ),
        yes_no(
            (
                "7. Do you rely on third parties for critical business operations (Cloud "
                "providers, managed IT, payment processors, API data)?"
            ),
            "third_party_reliance",
            when_yes(
                text("Please list key suppliers and functions they support:", "key_suppliers"),
            ),
        ),
        scale(
            (
                "8. Does your business continuity or disaster recovery plan specifically "
                "address prolonged outages of critical third-party services?"
            ),
            "third_party_outage_plan",
            (
                (
                    "Our business continuity and disaster recovery plans do not specifically "
                    "address prolonged outages of critical third-party services."
                ),
                (
                    "Our plans generally mention third-party risks, but do not include "
                    "detailed strategies for extended outages of critical providers."
                ),
                (
                    "Our plans include scenarios for disruptions to critical third-party "
                    "services, but they are not deeply detailed or regularly tested."
                ),
                (
                    "Our business continuity and disaster recovery plans explicitly cover "
                    "prolonged outages of critical third-party services, with documented "
                    "procedures, alternate arrangements, and regular testing."
                ),
            ),
        ),
        scale(
            (
                "9. Have you assessed how a primary cloud provider outage would impact your "
                "operations, and does your continuity plan address this?"
            ),
            "cloud_provider_assessment",
            (
                "No assessment has been done, and no contingency exists for cloud service failure.",
                (
                    "Cloud risks are informally acknowledged, with documented impacts of "
                    "downtime and some alternate communication or manual processes identified, "
                    "but they are not fully integrated into formal planning."
                ),
                (
                    "Cloud dependency is mapped in continuity plans, and mitigations (e.g., "
                    "data export, failover zones) are in place."
                ),
                (
                    "Cloud risk is deeply integrated into BCP, with multi-region failover, "
                    "vendor SLAs, and automated recovery tested regularly."
                ),
            ),
        ),
        scale(
            (
                "10. How do you investigate and address the root cause of major security "
                "incidents, service problems, or customer complaints?"
            ),
            "incident_investigation",
            (
                (
                    "Root cause is not formally investigated; focus is only on fixing the "
                    "immediate issue."
                ),
                (
                    "Issues are discussed internally, with root cause reviews and some "
                    "documentation or follow-up for significant incidents, but lessons learned "
                    "and corrective actions are applied inconsistently."
                ),
                (
                    "A structured post-incident review (PIR) process is used for all major "
                    "events, with documented corrective actions."
                ),
                (
                    "Formal root cause analysis is conducted with executive oversight, "
                    "cross-functional input, tracked improvements, and trend analysis."
                ),
            ),
        ),
    ),
)

# ── 8. Third Party, Vendor & Supply Chain Controls ────────────────────

THIRD_PARTY = SectionSpec(
    title="8. Third Party, Vendor & Supply Chain Controls",
    number=8,
    answer_key="thirdParty",
    questions=(
        scale(
            (
                "1. What steps are taken when bringing on a new customer to assess potential "
                "risks to your business?"
            ),
            "customer_risk_assessment",
            (
                "No formal risk assessment is conducted before onboarding new customers.",
                (
                    "Vetting is mostly informal, relying on relationship history or perceived "
                    "reputation, with some credit or legal checks performed, but these are not "
                    "standardized."
                ),
                (
                    "The company uses a risk-based onboarding process including financial, "
                    "operational, and legal reviews for high-risk customers."
                ),
                (
                    "A formal customer risk assessment framework is in place, including KYC, "
                    "creditworthiness, contract risk, regulatory exposure, and service "
                    "capacity evaluation."
                ),
            ),
        ),
        scale(
            (
                "2. Do you have a formal due diligence process to evaluate potential risks "
                "when onboarding new vendors or suppliers?"
            ),
            "vendor_due_diligence",
            (
                "Vendors are onboarded informally with no checks or documentation.",
                (
                    "Basic vetting is performed, such as checking references and requiring "
                    "insurance certificates from vendors, but reviews of insurance and risk "
                    "factors are inconsistent and formal risk assessments are rare."
                ),
                (
                    "Onboarding includes documented review of insurance, security, and "
                    "financial risk, with sign-off by relevant departments."
                ),
                (
                    "A structured onboarding workflow is in place, including insurance "
                    "verification, legal review, risk scoring, and approval gates for "
                    "higher-risk vendors."
                ),
            ),
        ),
        scale(
            (
                "3. How does your organization assess and monitor the cybersecurity posture of "
                "third-party vendors, and what steps are taken if a vendor is found to pose "
                "elevated risk?"
            ),
            "vendor_cybersecurity_assessment",
            (
                (
                    "We don't currently assess vendor cybersecurity posture and rely on "
                    "vendors to manage their own risks."
                ),
                (
                    "We conduct basic due diligence when onboarding vendors, such as reviewing "
                    "security questionnaires, but we don't monitor risk on an ongoing basis."
                ),
                (
                    "We assess vendor cyber risk at onboarding and periodically review key "
                    "vendors' security posture. If a vendor is found to pose elevated risk, we "
                    "may request remediation or consider contract changes."
                ),
                (
                    "We use continuous monitoring tools (e.g., third-party risk scoring or "
                    "threat intelligence platforms) to track vendor cybersecurity posture in "
                    "real time. High-risk vendors trigger formal escalation protocols, "
                    "including audits, contractual enforcement, or offboarding if necessary."
                ),
            ),
        ),
        scale(
            (
                "4. Do you have redundant systems or alternate suppliers in place to minimize "
                "disruption if a critical third party fails or is unavailable?"
            ),
            "redundant_systems",
            (
                (
                    "We rely on single providers for critical services and would face major "
                    "disruption if one failed."
                ),
                (
                    "We are aware of possible alternates but have no formal agreements or "
                    "automated systems. Switching would be manual and could be delayed."
                ),
                (
                    "We have identified and maintain relationships with alternate suppliers, "
                    "or have partial redundant systems for critical functions. However, these "
                    "are not fully integrated or routinely tested, so some disruption could "
                    "still occur."
                ),
                (
                    "We have fully redundant systems and formal agreements with alternative "
                    "suppliers, along with tested failover processes, to ensure minimal "
                    "disruption in the event of a critical third-party failure. These "
                    "contingencies are regularly reviewed and tested as part of our business "
                    "continuity program."
                ),
            ),
        ),
        scale(
            (
                "5. Do your vendors agree to take responsibility if they mishandle personal or "
                "confidential information?"
            ),
            "vendor_liability",
            (
                (
                    "There are no contract terms addressing vendor responsibility for data "
                    "mishandling."
                ),
                (
                    "Many vendor contracts include general confidentiality or data protection "
                    "clauses, but the enforceability, scope, and presence of liability terms "
                    "vary."
                ),
                (
                    "Vendor agreements include specific data handling obligations, breach "
                    "notification requirements, and indemnity clauses."
                ),
                (
                    "All vendor agreements involving sensitive data include legally vetted, "
                    "standardized language on liability, data safeguards, breach response, and "
                    "indemnification for damages."
                ),
            ),
        ),
        scale(
            (
                "6. Do your critical vendors provide proof of strong security practices (like "
                "SOC 2 or ISO 27001), and how often is that reviewed?"
            ),
            "vendor_security_certifications",
            (
                "Vendors do not provide security certifications or attestations.",
                (
                    "Some vendors provide security documentation, but its presence and quality "
                    "are inconsistent, and reviews are infrequent."
                ),
                (
                    "Critical vendors are required to provide security certifications (e.g., "
                    "SOC 2, ISO 27001), and these are reviewed annually."
                ),
                (
                    "All critical vendors must maintain current security certifications, which "
                    "are reviewed regularly and integrated into vendor risk management "
                    "processes."
                ),
            ),
        ),
        scale(
            (
                "7. Do you require vendors to notify you if they experience a security breach "
                "or incident?"
            ),
            "vendor_breach_notification",
            (
                "Vendors are not required to notify us of security incidents.",
                (
                    "Some contracts include breach notification language, but timelines and "
                    "requirements are inconsistent."
                ),
                (
                    "Vendor contracts require prompt notification of security incidents, with "
                    "defined timelines and information requirements."
                ),
                (
                    "Comprehensive breach notification requirements are in place, including "
                    "specific timelines, escalation procedures, and impact assessment "
                    "protocols."
                ),
            ),
        ),
        scale(
            "8. How do you track and manage the risks associated with your supply chain?",
            "supply_chain_risk_management",
            (
                "Supply chain risks are not formally tracked or managed.",
                (
                    "Basic supplier information is maintained, but risk assessment is limited "
                    "to financial or operational concerns."
                ),
                (
                    "A supply chain risk register is maintained, with periodic review of key "
                    "suppliers and risk mitigation strategies."
                ),
                (
                    "Comprehensive supply chain risk management includes continuous "
                    "monitoring, risk scoring, scenario planning, and integration with "
                    "enterprise risk management."
                ),
            ),
        ),
        scale(
            (
                "9. Do you conduct regular audits or assessments of your most critical "
                "third-party relationships?"
            ),
            "third_party_audits",
            (
                "No regular audits or assessments are conducted.",
                (
                    "Informal reviews of vendor performance occur occasionally, but there are "
                    "no structured audits."
                ),
                (
                    "Periodic assessments are conducted for critical vendors, including "
                    "performance and compliance reviews."
                ),
                (
                    "Systematic audits and assessments are performed on a regular schedule, "
                    "with standardized criteria and documented findings."
                ),
            ),
        ),
    ),
)

# ── 9. Privacy, Data Security & API Controls ──────────────────────────

PRIVACY = SectionSpec(
    title="9. Privacy, Data Security & API Controls",
    number=9,
    answer_key="privacy",
    question_reserve_mm=30,
    questions=(
        yes_no(
            "1. Do you collect, store, or process customer data?",
            "collect_customer_data",
            when_yes(
                composite(
                    "Data Types and Record Counts:",
                    (
                        ("contact_info_records", "Contact information records"),
                        ("personal_health_data_records", "Personal health data records"),
                        ("payment_card_data_records", "Payment card data records"),
                        ("financial_records_records", "Financial records"),
                        ("government_id_numbers_records", "Government ID numbers records"),
                        ("biometric_data_records", "Biometric data records"),
                    ),
                    suffix=" records",
                ),
            ),
        ),
        scale(
            (
                "2. Do you have formal policies governing the collection, use, storage, and "
                "disposal of personal or sensitive data?"
            ),
            "data_governance_policies",
            (
                "No formal policies exist for data governance.",
                "Basic policies are in place but may be incomplete or not regularly updated.",
                (
                    "Comprehensive data governance policies exist and are regularly reviewed "
                    "and updated."
                ),
                (
                    "Mature data governance framework with detailed policies, procedures, and "
                    "regular compliance monitoring."
                ),
            ),
        ),
        scale(
            (
                "3. Do you provide privacy notices to individuals whose data you collect, and "
                "do you obtain appropriate consent?"
            ),
            "privacy_notices_consent",
            (
                "No privacy notices are provided, and consent is not obtained.",
                (
                    "Basic privacy notices are provided in some cases, but consent processes "
                    "are inconsistent."
                ),
                (
                    "Clear privacy notices are provided, and appropriate consent is obtained "
                    "for data collection and use."
                ),
                (
                    "Comprehensive privacy program with detailed notices, granular consent "
                    "mechanisms, and regular compliance reviews."
                ),
            ),
        ),
        scale(
            (
                "4. Do you have processes in place to respond to individual requests regarding "
                "their personal data (access, correction, deletion)?"
            ),
            "data_subject_requests",
            (
                "No formal process exists for handling individual data requests.",
                (
                    "Basic processes exist but may not cover all types of requests or have "
                    "clear timelines."
                ),
                (
                    "Formal processes are in place to handle data subject requests within "
                    "required timeframes."
                ),
                (
                    "Comprehensive data subject rights program with automated workflows and "
                    "tracking systems."
                ),
            ),
        ),
        scale(
            "5. How is sensitive data encrypted, both at rest and in transit?",
            "data_encryption",
            (
                "Sensitive data is not systematically encrypted.",
                "Some encryption is used, but coverage is inconsistent or uses outdated methods.",
                "Strong encryption is used for sensitive data both at rest and in transit.",
                (
                    "Enterprise-grade encryption with key management, regular rotation, and "
                    "compliance monitoring."
                ),
            ),
        ),
        scale(
            (
                "6. Do you conduct regular privacy impact assessments when implementing new "
                "systems or processes?"
            ),
            "privacy_impact_assessments",
            (
                "Privacy impact assessments are not conducted.",
                "PIAs are conducted occasionally for major projects but not systematically.",
                "PIAs are required for new systems and processes that handle personal data.",
                (
                    "Comprehensive privacy-by-design approach with mandatory PIAs and ongoing "
                    "privacy monitoring."
                ),
            ),
        ),
        scale(
            (
                "7. How do you ensure third-party service providers protect personal data "
                "according to your standards?"
            ),
            "third_party_data_protection",
            (
                "No specific requirements for third-party data protection.",
                "Basic contractual requirements, but monitoring and enforcement are limited.",
                (
                    "Comprehensive data protection agreements with regular monitoring and "
                    "compliance checks."
                ),
                (
                    "Rigorous third-party data protection program with due diligence, ongoing "
                    "monitoring, and audit rights."
                ),
            ),
        ),
        scale(
            "8. Do you have an incident response plan specifically for privacy breaches?",
            "privacy_breach_response",
            (
                "No specific privacy breach response plan exists.",
                "Basic incident response procedures that may cover privacy breaches.",
                "Dedicated privacy breach response plan with notification procedures.",
                (
                    "Comprehensive privacy incident response with automated workflows, "
                    "stakeholder communication, and regulatory compliance."
                ),
            ),
        ),
        scale(
            "9. How do you manage data retention and ensure secure disposal of personal data?",
            "data_retention_disposal",
            (
                "No formal data retention or disposal policies exist.",
                "Basic retention guidelines but disposal processes are inconsistent.",
                "Formal data retention schedule with secure disposal procedures.",
                (
                    "Comprehensive data lifecycle management with automated retention and "
                    "certified secure disposal."
                ),
            ),
        ),
        scale(
            "10. Do you provide regular privacy and data protection training to employees?",
            "privacy_training",
            (
                "No formal privacy training is provided to employees.",
                "Basic privacy awareness included in general security training.",
                "Regular privacy training provided to all employees handling personal data.",
                (
                    "Comprehensive privacy training program with role-specific modules and "
                    "regular updates."
                ),
            ),
        ),
        scale(
            (
                "11. How do you monitor and audit compliance with privacy regulations and "
                "internal data protection policies?"
            ),
            "privacy_compliance_monitoring",
            (
                "No formal monitoring or auditing of privacy compliance.",
                "Occasional reviews of privacy practices and compliance.",
                "Regular internal audits and compliance monitoring for privacy requirements.",
                (
                    "Continuous compliance monitoring with automated tools, regular audits, "
                    "and corrective action tracking."
                ),
            ),
        ),
    ),
)

# ── 10. Intellectual Property & Content Governance Controls ───────────

INTELLECTUAL_PROPERTY = SectionSpec(
    title="10. Intellectual Property & Content Governance Controls",
    number=10,
    answer_key="intellectualProperty",
    questions=(
        scale(
            (
                "1. Do your contracts with customers, partners, or distributors include "
                "indemnification provisions that make you responsible for IP infringement "
                "claims?"
            ),
            "ip_indemnification_provisions",
            (
                (
                    "We haven't reviewed our contracts for IP indemnity exposure and are "
                    "unsure whether such provisions exist."
                ),
                (
                    "Some contracts include IP indemnities, but we accept them as-is without "
                    "negotiation or risk transfer strategies."
                ),
                (
                    "We review IP indemnity provisions case-by-case and seek to limit or share "
                    "liability where possible, often with legal input."
                ),
                (
                    "We have a formal process for reviewing and negotiating IP indemnities, "
                    "consistently limit our exposure through contract language, and align "
                    "coverage with our insurance program to ensure claims are insurable."
                ),
            ),
        ),
        scale(
            "2. What is your plan if your company is accused of infringing someone else's IP?",
            "ip_infringement_plan",
            (
                "No plan or insurance is in place to address IP disputes.",
                (
                    "Leadership relies on legal counsel and a general dispute response "
                    "approach, but there is no documented or detailed plan specific to IP "
                    "disputes."
                ),
                (
                    "A formal incident response process is in place, including legal review "
                    "and insurance support."
                ),
                (
                    "The company has a documented IP risk response plan, legal counsel on "
                    "standby, indemnification strategies, and intellectual property insurance."
                ),
            ),
        ),
        scale(
            "3. How do you monitor and manage the use of third-party software licenses?",
            "third_party_license_monitoring",
            (
                "Software is used without tracking licenses or usage rights.",
                (
                    "Teams manage licensing informally with a partial inventory and some tools "
                    "to track third-party software, but tracking is incomplete and "
                    "decentralized."
                ),
                (
                    "License use is tracked and reviewed regularly, with controls to prevent "
                    "unauthorized or expired use."
                ),
                (
                    "Comprehensive license management includes automated tracking, compliance "
                    "monitoring, and regular audits by legal or procurement teams."
                ),
            ),
        ),
        scale(
            (
                "4. Do you have processes in place to ensure that your products or services "
                "don't infringe on existing patents, trademarks, or copyrights?"
            ),
            "ip_infringement_prevention",
            (
                "No formal processes are in place to check for potential IP infringement.",
                (
                    "Basic IP searches are conducted informally during product development, "
                    "but there are no standard procedures or documentation."
                ),
                (
                    "Regular IP clearance procedures are followed, including patent and "
                    "trademark searches before product launches."
                ),
                (
                    "Comprehensive IP due diligence is conducted throughout the product "
                    "development lifecycle, with legal review and documented clearance "
                    "processes."
                ),
            ),
        ),
        scale(
            (
                "5. How do you protect your own intellectual property (patents, trademarks, "
                "trade secrets)?"
            ),
            "own_ip_protection",
            (
                "No formal IP protection strategy is in place.",
                (
                    "Some IP assets are protected (e.g., trademarks registered), but "
                    "protection is inconsistent and reactive."
                ),
                (
                    "Active IP protection program including trademark and patent filings, "
                    "trade secret policies, and employee agreements."
                ),
                (
                    "Comprehensive IP strategy with portfolio management, regular IP audits, "
                    "enforcement procedures, and strategic filing programs."
                ),
            ),
        ),
        scale(
            (
                "6. Do you have content moderation or review processes for user-generated "
                "content on your platforms?"
            ),
            "content_moderation",
            (
                "No content moderation processes are in place.",
                (
                    "Basic content moderation through automated filtering or reactive "
                    "reporting, but coverage is limited."
                ),
                (
                    "Regular content moderation combining automated tools and human review for "
                    "policy violations."
                ),
                (
                    "Comprehensive content governance with proactive monitoring, clear "
                    "policies, appeals processes, and regular policy updates."
                ),
            ),
        ),
        scale(
            "7. How do you handle DMCA takedown requests or other IP-related complaints?",
            "dmca_takedown_process",
            (
                "No formal process exists for handling IP complaints or takedown requests.",
                (
                    "Basic procedures for responding to takedown requests, but processes may "
                    "be inconsistent."
                ),
                (
                    "Established DMCA and IP complaint procedures with designated personnel "
                    "and response timelines."
                ),
                (
                    "Comprehensive IP complaint management system with automated workflows, "
                    "legal review, and compliance tracking."
                ),
            ),
        ),
        scale(
            (
                "8. Do you have policies governing employee creation and ownership of IP "
                "during their employment?"
            ),
            "employee_ip_policies",
            (
                "No formal policies exist regarding employee IP creation or ownership.",
                (
                    "Basic employment agreements include some IP assignment clauses, but "
                    "policies are not comprehensive."
                ),
                (
                    "Clear IP policies and assignment agreements are in place for all "
                    "employees involved in creative or technical work."
                ),
                (
                    "Comprehensive IP employment policies with invention disclosure processes, "
                    "compensation frameworks, and regular training."
                ),
            ),
        ),
    ),
)

# ── 11. People, Employment Practices & Insider Controls ───────────────

EMPLOYMENT = SectionSpec(
    title="11. People, Employment Practices & Insider Controls",
    number=11,
    answer_key="employment",
    questions=(
        scale(
            (
                "1. What background checks or screening do you use to evaluate new hires, "
                "especially for roles with access to sensitive data or systems?"
            ),
            "background_checks",
            (
                "No background checks or screening are conducted before hiring.",
                (
                    "Basic reference checks and, for sensitive roles, occasional criminal "
                    "background or employment verification are performed, but there is no "
                    "formal screening policy and practices are inconsistent."
                ),
                (
                    "Standardized screening process includes criminal, employment, and "
                    "education verification for all roles with data/system access."
                ),
                (
                    "A comprehensive, risk-based screening process is applied based on role "
                    "sensitivity, including background, credit (where appropriate), and "
                    "regulatory compliance checks."
                ),
            ),
        ),
        scale(
            (
                "2. What is your process for ensuring new hires understand and follow your "
                "company's key policies, like security and acceptable use?"
            ),
            "new_hire_policy_training",
            (
                "New hires receive little or no orientation on company policies.",
                (
                    "New hires receive policies to review as part of basic onboarding, with "
                    "signed acknowledgment required for key policies like confidentiality or "
                    "acceptable use, but broader training or acknowledgment is not "
                    "consistently required."
                ),
                (
                    "New hires complete structured onboarding, including required training on "
                    "security, privacy, and acceptable use policies."
                ),
                (
                    "Onboarding includes interactive, role-specific policy training with "
                    "testing, tracked completion, and annual re-certification for key policies."
                ),
            ),
        ),
        scale(
            (
                "3. How are employees trained to avoid accidentally sharing confidential "
                "information through email, messages, or presentations?"
            ),
            "confidentiality_training",
            (
                "No training is provided on handling confidential information.",
                (
                    "Employees receive informal reminders and confidentiality training during "
                    "onboarding, but there is no structured or ongoing training program."
                ),
                (
                    "Regular training is provided, including email and presentation dos/don'ts "
                    "and examples of accidental disclosure."
                ),
                (
                    "Employees receive role-based, scenario-driven training with testing, "
                    "reinforced by policy, monitoring, and reporting mechanisms."
                ),
            ),
        ),
        scale(
            (
                "4. What steps are in place to detect unusual employee behavior that could "
                "indicate a security or policy issue?"
            ),
            "unusual_behavior_detection",
            (
                "No monitoring or detection tools or processes are in place.",
                (
                    "Potential issues are identified informally through manager observation or "
                    "peer reporting, with HR or IT conducting manual log reviews when concerns "
                    "arise, but there is no ongoing monitoring."
                ),
                (
                    "Systems log user activity and can flag anomalies; HR and IT have a "
                    "defined process to investigate concerns."
                ),
                (
                    "Behavioral analytics and monitoring tools are in place for high-risk "
                    "roles, with integrated alerting, response protocols, and legal/HR "
                    "oversight."
                ),
            ),
        ),
        scale(
            (
                "5. Do employment agreements clearly define confidentiality obligations, IP "
                "ownership, and terms that continue after someone leaves?"
            ),
            "employment_agreement_terms",
            (
                (
                    "Employment agreements do not include confidentiality or IP ownership "
                    "provisions, and have no post-employment obligations."
                ),
                (
                    "Some agreements include confidentiality clauses, but IP ownership or "
                    "post-employment obligations are missing or inconsistent."
                ),
                (
                    "Most agreements include confidentiality, IP ownership, and some terms "
                    "that extend after employment ends, though not always reviewed or tailored."
                ),
                (
                    "All employment agreements clearly define confidentiality, IP ownership, "
                    "and post-employment obligations, are reviewed by legal counsel, and "
                    "updated regularly."
                ),
            ),
        ),
        scale(
            (
                "6. What steps ensure NDAs are signed, enforced, and followed, particularly "
                "after employment ends?"
            ),
            "nda_enforcement",
            (
                (
                    "NDAs are rarely used or tracked, with no process to enforce them during "
                    "or after employment."
                ),
                (
                    "NDAs are signed for some roles or situations, but tracking is informal "
                    "and follow-up after employment is minimal."
                ),
                (
                    "NDAs are standard for employees and key contractors, tracked centrally, "
                    "with reminders of obligations given during exit processes."
                ),
                (
                    "NDAs are mandatory for all staff and applicable vendors, systematically "
                    "tracked, enforced with formal exit procedures, and obligations monitored "
                    "post-employment."
                ),
            ),
        ),
    ),
)

# ── 12. Artificial Intelligence Tools & Controls ──────────────────────

AI_TOOLS = SectionSpec(
    title="12. Artificial Intelligence Tools & Controls",
    number=12,
    answer_key="aiTools",
    questions=(
        scale(
            (
                "1. Do you have formal policies governing employee use of generative AI tools "
                "in the workplace?"
            ),
            "ai_tool_policies",
            (
                (
                    "No formal policy exists; employees use AI tools at their discretion "
                    "without oversight or guidance."
                ),
                (
                    "Informal guidelines are communicated verbally or via ad hoc "
                    "communications, but no formalized or documented policy is in place."
                ),
                (
                    "A documented policy exists outlining acceptable AI use cases and "
                    "prohibited applications; periodic reminders or basic training are "
                    "provided."
                ),
                (
                    "A comprehensive, regularly updated AI use policy is in place, aligned "
                    "with legal, regulatory, and ethical standards. Mandatory employee "
                    "training, acknowledgement tracking, and compliance audits ensure "
                    "adherence."
                ),
            ),
        ),
        scale(
            (
                "2. How does your organization ensure sensitive, proprietary or customer data "
                "is not inadvertently inputted into public or third-party AI tools?"
            ),
            "ai_data_protection",
            (
                (
                    "No controls or employee awareness; sensitive data may be shared with AI "
                    "tools without restriction or monitoring."
                ),
                (
                    "Employees are instructed not to share sensitive data with AI tools, but "
                    "enforcement is manual and there are no technical safeguards."
                ),
                (
                    "Data classification and access rules are defined, with monitoring tools "
                    "or DLP (Data Loss Prevention) systems in place to detect and prevent "
                    "accidental sharing."
                ),
                (
                    "Strong, enforced controls combining technical safeguards (e.g., AI input "
                    "filtering, DLP, endpoint restrictions) with mandatory training, "
                    "AI-specific data handling protocols, and real-time monitoring to prevent "
                    "sensitive data leakage."
                ),
            ),
        ),
        scale(
            (
                "3. How are AI tools provisioned and monitored internally to ensure only "
                "authorized employees can access and use them?"
            ),
            "ai_tool_provisioning",
            (
                (
                    "No restrictions; any employee can access and use AI tools, including "
                    "unsanctioned or public platforms, without oversight."
                ),
                (
                    "AI tool access is limited to certain teams, but controls are informal and "
                    "not technically enforced (e.g., relying on manager approval or trust)."
                ),
                (
                    "Approved AI tools are centrally provisioned with role-based access "
                    "controls; usage logs are reviewed periodically but not continuously "
                    "monitored."
                ),
                (
                    "Enterprise-approved AI tools integrated with identity and access "
                    "management (IAM), multi-factor authentication, continuous monitoring, "
                    "automated alerts for misuse, and centralized reporting dashboards for "
                    "compliance oversight."
                ),
            ),
        ),
        scale(
            (
                "4. What steps do you take to make sure AI-generated content doesn't violate "
                "privacy rules or IP rights?"
            ),
            "ai_content_compliance",
            (
                "No review or safeguards are in place to monitor AI-generated content.",
                (
                    "There is informal awareness of potential privacy and IP risks, with some "
                    "safeguards such as manual review of public content, but no specific "
                    "controls or consistent validation process are in place."
                ),
                (
                    "The business has implemented content review procedures, and AI output is "
                    "checked for privacy or IP issues before publication or use."
                ),
                (
                    "There is a formal review and compliance process involving legal, "
                    "compliance, and product teams to ensure AI outputs align with IP, "
                    "copyright, and data privacy obligations."
                ),
            ),
        ),
        scale(
            (
                "5. Have you implemented controls to monitor and validate the accuracy and "
                "reliability of outputs generated by third-party AI tools?"
            ),
            "ai_output_validation",
            (
                (
                    "No controls in place; outputs from AI tools are used without review or "
                    "validation, relying entirely on the tool's outputs."
                ),
                (
                    "Manual review of outputs occurs inconsistently, dependent on individual "
                    "user discretion, with no formal validation process or documented "
                    "standards."
                ),
                (
                    "A formal processes exist for reviewing and validating AI outputs, "
                    "including documented criteria and periodic spot checks by subject matter "
                    "experts."
                ),
                (
                    "A comprehensive validation framework in place, combining automated "
                    "checks, human-in-the-loop oversight, and ongoing performance monitoring. "
                    "Continuous audits and feedback loops are used to detect errors, bias, and "
                    "drift, with results feeding into process improvements."
                ),
            ),
        ),
        scale(
            (
                "6. Do you have incident response procedures in place to address errors, "
                "misuse, or breaches resulting from third-party AI tool use?"
            ),
            "ai_incident_response",
            (
                "No formal incident response procedures exist for AI-related errors or misuse.",
                (
                    "General IT or cybersecurity incident response procedures exist but do not "
                    "address AI-specific risks or third-party tool misuse."
                ),
                (
                    "A documented incident response plan includes AI-related scenarios, with "
                    "designated roles and escalation paths. Periodic tabletop exercises or "
                    "testing are conducted, but scope remains limited."
                ),
                (
                    "A comprehensive AI-specific incident response plan is fully integrated "
                    "with enterprise risk and cybersecurity frameworks. It includes rapid "
                    "detection, predefined playbooks for AI errors/misuse, coordination with "
                    "third-party vendors, post-incident reviews, and continuous improvement."
                ),
            ),
        ),
        scale(
            (
                "7. Have you reviewed whether your insurance or contracts adequately address "
                "risks from using AI, such as errors, reputation damage, or legal issues?"
            ),
            "ai_insurance_review",
            (
                (
                    "No review has been done, and existing policies or contracts may not "
                    "address AI-related risks."
                ),
                (
                    "AI-related risks have been considered internally, and while some "
                    "insurance coverage has been extended or gaps flagged by general counsel, "
                    "there has been no formal review or comprehensive adjustments to coverage."
                ),
                (
                    "AI-related risks have been reviewed with legal and insurance advisors, "
                    "and contracts include basic protections (e.g., disclaimers, indemnity)."
                ),
                (
                    "The company proactively manages AI risks through tailored contractual "
                    "clauses, D&O/E&O/cyber coverage extensions, and periodic reviews aligned "
                    "to evolving uses of AI and regulatory guidance."
                ),
            ),
        ),
        scale(
            (
                "8. Do you require contractual indemnities or evidence of insurance from "
                "third-party AI vendors used in your internal operations?"
            ),
            "ai_vendor_indemnities",
            (
                (
                    "We accept the vendors Terms of Service without review or monitoring of "
                    "indemnification obligations."
                ),
                (
                    "Some contracts include general indemnification language, but vendor "
                    "insurance evidence is not consistently requested."
                ),
                (
                    "Contracts include defined indemnities for AI-related risks and require "
                    "vendors to provide proof of insurance, but enforcement and periodic "
                    "review are limited."
                ),
                (
                    "Robust vendor agreements mandate AI-specific indemnification, verified "
                    "insurance coverage aligned with exposure (e.g., tech E&O, cyber), and "
                    "ongoing compliance monitoring to ensure protections remain current."
                ),
            ),
        ),
    ),
)

# ── 13. Prior Incidents & Claims ──────────────────────────────────────

PRIOR_INCIDENTS = SectionSpec(
    title="13. Prior Incidents & Claims",
    number=13,
    answer_key="priorIncidents",
    question_reserve_mm=30,
    questions=(
        yes_no(
            (
                "1. In the last 5 years, has the Company, or any entity falling within the "
                "definition of 'Insured' under the proposed Policy, its partners, directors, "
                "officers, or employees ever had a written demand or civil proceedings for "
                "compensatory damages made against them?"
            ),
            "written_demands",
            when_yes(text("If yes, provide details:", "written_demands_details_text")),
        ),
        checkboxes(
            (
                "2. In the past 5 years has the Company, or any entity falling within the "
                "definition of 'Insured' under the proposed Policy:"
            ),
            None,
            (
                Option(
                    "incident_privacy_claims",
                    (
                        "Received any claims or complaints regarding privacy, data protection "
                        "or network security, or unauthorized disclosure of information?"
                    ),
                    key="incident_privacy_claims",
                ),
                Option(
                    "incident_breach_notification",
                    "Notified any persons of a privacy violation and/or data breach incident?",
                    key="incident_breach_notification",
                ),
                Option(
                    "incident_extortion",
                    "Received an extortion demand relating to your data and/or computer systems?",
                    key="incident_extortion",
                ),
                Option(
                    "incident_network_outage",
                    (
                        "Experienced a network outage that resulted in a significant "
                        "disruption to your operations?"
                    ),
                    key="incident_network_outage",
                ),
                Option(
                    "incident_government_action",
                    (
                        "Been subject to any government action, investigation, subpoena "
                        "regarding any alleged violation of privacy law or regulation?"
                    ),
                    key="incident_government_action",
                ),
                Option(
                    "incident_ip_complaint",
                    (
                        "Received a complaint or cease and desist demand alleging trademark, "
                        "copyright, invasion of privacy, defamation with regard to content "
                        "published, displayed, or distributed by or on behalf of the applicant?"
                    ),
                    key="incident_ip_complaint",
                ),
                Option(
                    "incident_policy_covered",
                    "Experienced any incident which may be covered under this policy?",
                    key="incident_policy_covered",
                ),
            ),
            follow_up=when_any(
                [
                    text(
                        (
                            "If Yes to any of the above, please provide details on an addendum "
                            "including relevant dates, brief summary of incident and any "
                            "preventative measures that have been taken to prevent a "
                            "reoccurrence:"
                        ),
                        "incident_details_text",
                        answer_label="Details",
                    ),
                ],
            ),
        ),
        yes_no(
            (
                "3. Is the Applicant, or any person applying for this insurance aware of any "
                "fact, circumstance, situation, event, or act that reasonably could give rise "
                "to a claim against them for any coverages for which the Applicant is applying?"
            ),
            "potential_claims_awareness",
        ),
    ),
)

CORE_SECTIONS: tuple[SectionSpec, ...] = (
    SECTORS,
    GENERAL_INFORMATION,
    OPERATIONS,
    FINANCIALS,
    CONTRACTUAL_CONTROLS,
    CYBERSECURITY,
    DATA_BACKUP,
    THIRD_PARTY,
    PRIVACY,
    INTELLECTUAL_PROPERTY,
    EMPLOYMENT,
    AI_TOOLS,
    PRIOR_INCIDENTS,
)
