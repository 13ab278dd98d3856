from models import FolderNode, SetupStep, StepCategory, TabSpec

# Recommended tree, recreated inside Documents
FOLDER_STRUCTURE: tuple[FolderNode, ...] = (
    FolderNode(
        "01_Academic",
        description="Active school and exam prep material",
        is_top_level=True,
        subfolders=(
            FolderNode("JEE_2027", subfolders=(
                FolderNode("Physics"),
                FolderNode("Chemistry"),
                FolderNode("Math"),
                FolderNode("Trackers_Schedules"),
            )),
            FolderNode("School_Projects"),
            FolderNode("Assignments_Pending"),
        ),
    ),
    FolderNode(
        "02_Resources",
        description="Reference material that rarely changes",
        is_top_level=True,
        subfolders=(
            FolderNode("Question_Papers"),
            FolderNode("Digital_Textbooks"),
            FolderNode("Formula_Sheets"),
            FolderNode("Video_Lectures"),
        ),
    ),
    FolderNode(
        "03_Personal",
        description="Non-academic life management",
        is_top_level=True,
        subfolders=(
            FolderNode("Finance_Scholarships"),
            FolderNode("Identity_Docs"),
            FolderNode("Health_Medical"),
            FolderNode("Hobbies"),
        ),
    ),
    FolderNode(
        "04_Media",
        description="Visual and creative assets",
        is_top_level=True,
        subfolders=(
            FolderNode("Photos"),
            FolderNode("Videos"),
            FolderNode("Wallpapers_Icons"),
        ),
    ),
    FolderNode(
        "05_Archive",
        description="Completed work and old files",
        is_top_level=True,
        subfolders=(
            FolderNode("Previous_Grades"),
            FolderNode("Completed_Projects"),
        ),
    ),
    FolderNode(
        "99_Inbox",
        description="The 'Temporary' landing zone for unsorted files",
        is_top_level=True,
    ),
)

SETUP_STEPS: tuple[SetupStep, ...] = (
    SetupStep(
        id="clean-desktop",
        category=StepCategory.DESKTOP,
        title="The Zero-Icon Desktop",
        description="Your desktop is a workspace, not a storage unit.",
        details=(
            "Create a folder named 'Desktop_Cleanup_Date' on your desktop.",
            "Move EVERY single file and folder into this new folder.",
            "Right-click Desktop -> View -> Uncheck 'Show desktop icons'.",
            "Pin only your 3 most used apps to the Taskbar.",
            "Move the 'Desktop_Cleanup' folder to '99_Inbox' for sorting later.",
        ),
    ),
    SetupStep(
        id="clean-downloads",
        category=StepCategory.DOWNLOADS,
        title="Taming the Downloads Folder",
        description="Empty your downloads daily to prevent 'Digital Rust'.",
        details=(
            "Open Downloads. Sort by 'Date Modified'.",
            "Delete everything you don't recognize or haven't opened in 30 days.",
            "Move academic PDFs to '02_Resources/Question_Papers' or 'Digital_Textbooks'.",
            "Move personal photos to '04_Media/Photos'.",
            "Goal: The Downloads folder should be EMPTY by the end of the day.",
        ),
    ),
    SetupStep(
        id="quick-access",
        category=StepCategory.QUICK_ACCESS,
        title="The Quick Access Shortcut",
        description="Navigate like a pro with sidebar pinning.",
        details=(
            "Go to your Documents -> 01_Academic.",
            "Right-click the folder -> Select 'Pin to Quick Access'.",
            "Repeat for '02_Resources' and '99_Inbox'.",
            "Unpin 'Recent folders' from Quick Access settings to reduce clutter.",
        ),
    ),
)

# Map each step category to a badge for display
STEP_BADGES = {
    StepCategory.DESKTOP:      "🖥️",
    StepCategory.DOWNLOADS:    "📥",
    StepCategory.QUICK_ACCESS: "📌",
    StepCategory.AUTOMATION:   "⚙️",
}

NAMING_SCENARIOS = [
    {"title": "Exam Paper",    "name": "2026-05-12_Math_JEE-Advanced_Mock-01.pdf"},
    {"title": "Project Draft", "name": "2027-01-20_Chemistry_Periodic-Table_Draft-v1.docx"},
    {"title": "Personal Doc",  "name": "2025-12-01_Identity_Aadhar-Card_Scan.jpg"},
]

CLEAN_DOWNLOADS_SCRIPT = (
    'Get-ChildItem -Path "$HOME\\Downloads" -Recurse | '
    "Where-Object { $_.LastWriteTime -lt (Get-Date).AddDays(-30) } | "
    "Remove-Item -Force"
)

FILE_LIST_COMMAND = "dir /b /s > files.txt"

FILE_LIST_PLACEHOLDER = (
    "C:\\Users\\Student\\Downloads\\Physics_Notes_Final.pdf\n"
    "C:\\Users\\Student\\Downloads\\Screenshot_12.png..."
)

QUOTE = "A cluttered space leads to a cluttered mind. Organize today, study better tomorrow."

# Sidebar order
TABS: tuple[TabSpec, ...] = (
    TabSpec("structure",  "Folder Structure", "📁"),
    TabSpec("naming",     "Naming Rules",     "📋"),
    TabSpec("guide",      "Setup Guide",      "✅"),
    TabSpec("ai",         "AI Optimizer",     "🧠"),
    TabSpec("automation", "Automation",       "💻"),
)

TAB_KEYS = tuple(t.key for t in TABS)
