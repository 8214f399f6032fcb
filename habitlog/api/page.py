from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["page"])


@router.get("/", response_class=HTMLResponse)
def index_page() -> str:
    return """
<!doctype html>
<html lang='en'>
<head>
  <meta charset='utf-8'>
  <meta name='viewport' content='width=device-width,initial-scale=1'>
  <title>Habit Tracker</title>
  <style>
    body { font-family: system-ui, -apple-system, Segoe UI, Roboto, Arial; margin: 0; background: #f4f6fb; color: #1f2937; }
    .wrap { max-width: 560px; margin: 0 auto; padding: 24px 16px; }
    .row { display:flex; gap:8px; margin-bottom:16px; }
    input { flex:1; padding:10px; border-radius:8px; border:1px solid #cbd5e1; }
    button { padding:10px 14px; border-radius:8px; border:none; cursor:pointer; background:#2563eb; color:#fff; }
    ul { list-style:none; padding:0; margin:0; }
    .habit-item { display:flex; justify-content:space-between; align-items:center; background:#fff; border:1px solid #e2e8f0; border-radius:10px; padding:10px 12px; margin-bottom:8px; }
    .habit-name { cursor:pointer; flex:1; }
    .habit-item.completed .habit-name { text-decoration: line-through; color:#16a34a; }
    .delete-btn { background:#dc2626; }
  </style>
</head>
<body>
<div class='wrap'>
  <h1>My habits</h1>
  <div class='row'>
    <input id='newHabitInput' placeholder='New habit...' autocomplete='off'>
    <button id='addHabitBtn'>Add</button>
  </div>
  <ul id='habitList'></ul>
</div>
<script>
const API_URL = '/api';
const habitList = document.getElementById('habitList');
const newHabitInput = document.getElementById('newHabitInput');

function buildHabit(habit){
  const item = document.createElement('li');
  item.classList.add('habit-item');
  item.dataset.id = habit.id;
  if (habit.is_completed_today) item.classList.add('completed');

  const name = document.createElement('span');
  name.classList.add('habit-name');
  name.textContent = habit.name;
  name.addEventListener('click', () => toggleHabit(habit.id, !item.classList.contains('completed')));

  const del = document.createElement('button');
  del.classList.add('delete-btn');
  del.textContent = 'Delete';
  del.addEventListener('click', () => deleteHabit(habit.id));

  item.append(name, del);
  return item;
}

async function post(body){
  const r = await fetch(API_URL, {
    method: 'POST',
    headers: {'Content-Type': 'application/json'},
    body: JSON.stringify(body)
  });
  const data = await r.json();
  if (!r.ok || !data.success) throw new Error(data.error || ('HTTP ' + r.status));
  return data;
}

async function loadHabits(){
  try{
    const r = await fetch(API_URL + '?action=get_habits');
    const habits = await r.json();
    if (!r.ok) throw new Error(habits.error || ('HTTP ' + r.status));
    habitList.replaceChildren(...habits.map(buildHabit));
  }catch(e){
    console.error('Error fetching habits:', e);
    alert('Could not load habits: ' + (e.message || e));
  }
}

async function addHabit(){
  const name = newHabitInput.value.trim();
  if (!name){
    alert('Habit name cannot be empty!');
    return;
  }
  try{
    const result = await post({action: 'add_habit', name: name});
    habitList.prepend(buildHabit({id: result.id, name: result.name, is_completed_today: 0}));
    newHabitInput.value = '';
  }catch(e){
    alert('Could not add habit: ' + (e.message || e));
  }
}

async function toggleHabit(id, completed){
  try{
    await post({action: 'toggle_habit', id: id, completed: completed});
    const item = document.querySelector(`.habit-item[data-id='${id}']`);
    if (item) item.classList.toggle('completed', completed);
  }catch(e){
    alert('Could not update habit: ' + (e.message || e));
  }
}

async function deleteHabit(id){
  if (!confirm('Delete this habit?')) return;
  try{
    await post({action: 'delete_habit', id: id});
    const item = document.querySelector(`.habit-item[data-id='${id}']`);
    if (item) item.remove();
  }catch(e){
    alert('Could not delete habit: ' + (e.message || e));
  }
}

document.getElementById('addHabitBtn').addEventListener('click', addHabit);
newHabitInput.addEventListener('keypress', (event) => { if (event.key === 'Enter') addHabit(); });
loadHabits();
</script>
</body>
</html>
"""
