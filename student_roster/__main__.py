from student_roster.main import main

main()
