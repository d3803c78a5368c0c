"""Korean UI strings."""

STRINGS: dict[str, str] = {
    "Ready": "준비",
    "Open Test Case": "테스트 케이스 열기",
    "Open Test Suite": "테스트 스위트 열기",
    "Save Test Case": "테스트 케이스 저장",
    "Save Test Suite": "테스트 스위트 저장",
    "Select a File": "파일 선택",
    "Select one or more test cases to add": "추가할 테스트 케이스를 하나 이상 선택하세요",
    "Error loading test case": "테스트 케이스 로드 오류",
    "Error loading test suite": "테스트 스위트 로드 오류",
    "Error reopening test suite / case": "테스트 스위트/케이스 다시 열기 오류",
    "Error saving test case": "테스트 케이스 저장 오류",
    "Error saving test suite": "테스트 스위트 저장 오류",
    "The test case does not exist. You should probably remove it from the suite. The path specified is":
        "테스트 케이스가 존재하지 않습니다. 스위트에서 제거하는 것이 좋습니다. 지정된 경로:",
    "is modified. Do you want to save this test case?": "이(가) 수정되었습니다. 이 테스트 케이스를 저장하시겠습니까?",
    "The test case": "테스트 케이스",
    "Changing format may cause loss of unsaved changes. Do you want to continue?":
        "형식을 변경하면 저장되지 않은 변경 사항이 손실될 수 있습니다. 계속하시겠습니까?",
    "Untitled": "제목 없음",
}
