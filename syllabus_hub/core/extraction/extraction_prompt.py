"""Syllabus extraction prompt for Gemini.

Instructs the model to return one JSON object describing the course,
with exact rules for grading tables, exam dates and sentinel values.

Dependencies: None (pure prompt templates)
System role: Instruction set for the extraction call
"""

NO_MATERIALS_SENTINEL = "No required materials found"
NO_EXAM_DATES_SENTINEL = "No exam dates provided"

SYLLABUS_EXTRACTION_PROMPT = f"""Analyze this course syllabus PDF and extract the following information as a single JSON object:

{{
  "name": "Course name/title",
  "term": "Semester/term (e.g., Fall 2024)",
  "description": "Course description",
  "materials": "Required textbooks, supplies, or materials (if none found, use '{NO_MATERIALS_SENTINEL}')",
  "assessment": "Grading breakdown with percentages",
  "policies": "Course policies, attendance rules, academic integrity, etc.",
  "examDates": "Important exam dates (midterms, finals, major quizzes with dates/times) or '{NO_EXAM_DATES_SENTINEL}' if none found",
  "sections": [
    {{
      "sectionCode": "Section code (e.g., LEC0101)",
      "instructor": "Instructor name",
      "lectures": [
        {{
          "dayOfWeek": "Day (e.g., Monday)",
          "startTime": "Start time (e.g., 2:00 PM)",
          "endTime": "End time (e.g., 3:00 PM)",
          "location": "Room/building (e.g., BA 1190)"
        }}
      ]
    }}
  ]
}}

ASSESSMENT:
- Look carefully for tables, charts, or structured data showing grade breakdowns
- Extract the ACTUAL percentages from grading tables, not just the descriptive text around them
- Copy percentage values verbatim (e.g., "Midterm: 25%, Final Exam: 50%")
- Look for words like "weight", "percentage", "points", "marks" near assessment information
- If there are several assessment methods, list every one with its percentage
- When a table has column headers such as "Total quizzes" or "Total final exam", the percentage
  under each header is the weight of that assessment category
- Good examples:
  - "Midterm: 25%, Lab Exercises: 20%, Final Exam: 55%"
  - "Quizzes (5): 15%, Assignments (3): 30%, Final Project: 55%"
  - "Homework: 10%, Midterm 1: 20%, Midterm 2: 20%, Final: 50%"

EXAM DATES:
- Give specific dates and times for major exams (midterms, finals, major quizzes)
- Do NOT include weekly quizzes or regular assignments
- Include times and locations when available
- Examples: "Midterm 1: March 15, 2:00-4:00 PM, Room BA 1190", "Final Exam: April 20, 9:00 AM-12:00 PM"
- If no specific exam dates are found, use "{NO_EXAM_DATES_SENTINEL}"

DESCRIPTION AND POLICIES:
- Extract the full course description as written in the syllabus
- Include all relevant policies (attendance, late work, academic integrity, participation)

MATERIALS:
- If no textbooks, supplies, or materials are mentioned, use "{NO_MATERIALS_SENTINEL}"
- Otherwise list them clearly

If any other information is not found, use null for that field.
Extract ALL sections, instructors, and lecture times if several exist.
Return only the JSON object, with no commentary."""


def get_syllabus_extraction_prompt() -> str:
    """Get the syllabus extraction prompt.

    Returns:
        str: Instructions sent alongside the PDF part
    """
    return SYLLABUS_EXTRACTION_PROMPT
